#!/usr/bin/env python3
# Render TSV level grids (from mazetool.py) to PNGs using Pillow.

import argparse, os
from PIL import Image, ImageDraw, ImageFont

from trapmaze.grid import Grid
from trapmaze.tiles import FLOOR, GOAL, HAZARD, WALL, glyph_for

COLORS = {
    WALL:   (80, 80, 80, 255),
    FLOOR:  (30, 30, 30, 255),
    GOAL:   (255, 220, 0, 255),
    HAZARD: (200, 40, 40, 255),
}

def read_tsv(path):
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    try:
        return Grid.from_rows(rows)
    except ValueError as e:
        raise SystemExit(f"{path}: {e}")

def tile_image(tile_id, tile_size, font):
    img = Image.new("RGBA", (tile_size, tile_size), color=COLORS[tile_id])
    if tile_id in (GOAL, HAZARD):
        draw = ImageDraw.Draw(img)
        text = glyph_for(tile_id)
        tw = draw.textlength(text, font=font)
        draw.text(((tile_size - tw) / 2, (tile_size - 8) / 2), text, fill=(0, 0, 0, 255), font=font)
    return img

def render_grid(grid, out_png, tile_size=16, margin=0):
    font = ImageFont.load_default()
    cache = {}
    w, h = grid.width * tile_size + 2*margin, grid.height * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    for (x, y), tid in grid.cells():
        if tid not in cache:
            cache[tid] = tile_image(tid, tile_size, font)
        img = cache[tid]
        x0 = margin + x * tile_size
        y0 = margin + y * tile_size
        canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("tsv", nargs="+", help="TSV grids written by mazetool.py")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args()

    for tsv in args.tsv:
        name = os.path.splitext(os.path.basename(tsv))[0]
        png = os.path.join(args.outdir, f"{name}.png")
        render_grid(read_tsv(tsv), png, tile_size=args.tile)
    print(f"Wrote {len(args.tsv)} PNGs to {args.outdir}")

if __name__ == "__main__":
    main()

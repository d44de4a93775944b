#!/usr/bin/env python3
import argparse, csv, logging, os, sys
from trapmaze.config import DEFAULT_CONFIG
from trapmaze.mapgen.generator import generate_level
from trapmaze.render.text import render_text
from trapmaze.rng import make_rng

def write_tsv(mat, path):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        for r in mat:
            w.writerow(r)

def _level(args, level):
    return generate_level(level, args.width, args.height, make_rng(args.seed))

def cmd_show(args):
    lvl = _level(args, args.level)
    print(render_text(lvl))
    print(f"level={lvl.level_number} start={lvl.player_start} goal={lvl.goal} "
          f"hazards={len(lvl.hazards)}/{lvl.hazard_target} floor={lvl.floor_count}")

def cmd_emit(args):
    lvl = _level(args, args.level)
    write_tsv(lvl.grid.as_matrix(), args.out)
    print(f"Wrote {args.out}")

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    for n in range(1, args.count + 1):
        lvl = _level(args, n)
        path = os.path.join(args.outdir, f"{n:02d}.tsv")
        write_tsv(lvl.grid.as_matrix(), path)
    print(f"Wrote {args.count} levels to {args.outdir}")

def main(argv=None):
    p = argparse.ArgumentParser(description="Generate trapmaze levels")
    p.add_argument('--width', type=int, default=DEFAULT_CONFIG.width)
    p.add_argument('--height', type=int, default=DEFAULT_CONFIG.height)
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p0 = sub.add_parser('show')
    p0.add_argument('--level', type=int, default=1)
    p0.set_defaults(func=cmd_show)
    p1 = sub.add_parser('emit')
    p1.add_argument('--level', type=int, default=1)
    p1.add_argument('--out', type=str, required=True)
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    p2.add_argument('--count', type=int, default=10)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_batch)
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)
    try:
        args.func(args)
    except ValueError as e:
        p.error(str(e))

if __name__ == '__main__':
    main()

import pytest

from trapmaze.rng import PMRandom, ScriptedRandom, StdRandom, make_rng, pm_next, shuffle

def test_pm_next_minimal_standard():
    assert pm_next(1) == 16807
    assert pm_next(16807) == 282475249

def test_pm_zero_seed_is_not_stuck():
    r = PMRandom(0)
    assert r.state == 1
    assert r.next32() == 16807

def test_below_stays_in_range():
    r = PMRandom(12345)
    vals = [r.below(7) for _ in range(500)]
    assert min(vals) >= 0 and max(vals) <= 6
    assert len(set(vals)) == 7

def test_below_rejects_non_positive_bounds():
    for src in (PMRandom(1), StdRandom(1), ScriptedRandom([0])):
        with pytest.raises(ValueError):
            src.below(0)

def test_scripted_cycles_and_reduces_modulo():
    r = ScriptedRandom([0, 5, 2])
    assert [r.below(3) for _ in range(6)] == [0, 2, 2, 0, 2, 2]
    assert r.calls == 6

def test_all_zero_shuffle_rotates_left():
    items = ["a", "b", "c", "d", "e"]
    shuffle(ScriptedRandom([0]), items)
    assert items == ["b", "c", "d", "e", "a"]

def test_seeded_sources_repeat():
    a, b = make_rng(99), make_rng(99)
    assert [a.below(1000) for _ in range(20)] == [b.below(1000) for _ in range(20)]
    assert isinstance(make_rng(), StdRandom)

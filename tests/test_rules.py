from __future__ import annotations

from falling_blocks.game import ScoringRules


def test_line_clear_score_is_linear():
    rules = ScoringRules()
    assert rules.score_for_lines(0) == 0
    assert rules.score_for_lines(1) == 100
    assert rules.score_for_lines(4) == 400


def test_fall_interval_shrinks_per_row():
    rules = ScoringRules()
    assert rules.next_fall_interval(800, 0) == 800
    assert rules.next_fall_interval(800, 1) == 790
    assert rules.next_fall_interval(800, 3) == 770


def test_fall_interval_never_drops_below_floor():
    rules = ScoringRules()
    interval = rules.initial_fall_interval
    for _ in range(200):
        interval = rules.next_fall_interval(interval, 4)
        assert interval >= 150
    assert interval == 150
    assert rules.next_fall_interval(155, 1) == 150

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_points: int = 100
    soft_drop_points: int = 1
    hard_drop_points: int = 2
    initial_fall_interval: int = 800
    fall_interval_step: int = 10
    min_fall_interval: int = 150

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.line_clear_points

    def next_fall_interval(self, current: int, lines: int) -> int:
        if lines <= 0:
            return current
        return max(self.min_fall_interval, current - lines * self.fall_interval_step)

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    single_line_points: int = 10
    multi_line_factor: int = 15

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        if lines == 1:
            return self.single_line_points
        # A double already scores 30, three times a single.
        return self.multi_line_factor * lines

"""
Per-line measurements used to tell leading prose apart from list items.

Each line is reduced to a point `(length, symbol_count)`. List items in one list
tend to cluster, so a first line far from the cluster is likely an introduction.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from relist.sequence.patterns import count_symbols


@dataclass(frozen=True)
class LineStats:
    length: int
    symbol_count: int

    @classmethod
    def of(cls, line: str) -> LineStats:
        return cls(length=len(line), symbol_count=count_symbols(line))

    def distance_to(self, average_len: float, average_symbol_count: float) -> float:
        """Euclidean distance from this line's point to the mean point."""
        return math.sqrt(
            (self.length - average_len) ** 2 + (self.symbol_count - average_symbol_count) ** 2
        )


@dataclass(frozen=True)
class SpreadSummary:
    """
    Mean point of a group of lines and how spread out the group is around it.

    `dist_std_deviation` is the square root of the *sum* of squared deviations of
    each line's distance from the mean distance. It is not divided by the number
    of lines; the leading text threshold is calibrated against this value.
    """

    average_len: float
    average_symbol_count: float
    avg_dist: float
    dist_std_deviation: float

    def distance_of(self, stats: LineStats) -> float:
        return stats.distance_to(self.average_len, self.average_symbol_count)


def summarize(stats: Sequence[LineStats]) -> SpreadSummary:
    """Summarize a non-empty group of line measurements."""
    if not stats:
        raise ValueError("Cannot summarize an empty group of lines")
    count = len(stats)
    average_len = sum(s.length for s in stats) / count
    average_symbol_count = sum(s.symbol_count for s in stats) / count

    dists = [s.distance_to(average_len, average_symbol_count) for s in stats]
    avg_dist = sum(dists) / count
    dist_std_deviation = math.sqrt(sum((d - avg_dist) ** 2 for d in dists))

    return SpreadSummary(
        average_len=average_len,
        average_symbol_count=average_symbol_count,
        avg_dist=avg_dist,
        dist_std_deviation=dist_std_deviation,
    )

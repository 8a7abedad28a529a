from dataclasses import dataclass
from typing import Optional

from autosw.engine.structures.genomics import NamedRead

FORWARD = "forward"
REVERSE_COMPLEMENT = "reverse_complement"

@dataclass(frozen=True)
class AlignmentStats:
    identical: int
    gaps_x: int
    gaps_y: int
    mismatches: int

    @property
    def length(self) -> int:
        return self.identical + self.mismatches

    @property
    def gaps(self) -> int:
        return self.gaps_x + self.gaps_y

    @property
    def percent_identity(self) -> float:
        return _percent(self.identical, self.length)

    @property
    def percent_gaps(self) -> float:
        return _percent(self.gaps, self.length)

    @property
    def percent_mismatches(self) -> float:
        return _percent(self.mismatches, self.length)

@dataclass(frozen=True)
class AlignmentResult:
    """A local alignment and the closed index ranges it covers in X and Y.

    When the best score is 0 nothing aligns: both aligned strings are empty and
    each range collapses to ``(best, best)`` on the best cell. Check ``len()`` before
    reading the ranges as covered symbols.
    """
    score: int
    aligned_x: str
    aligned_y: str
    x_indices: tuple[int, int]
    y_indices: tuple[int, int]

    def __len__(self):
        return len(self.aligned_x)

@dataclass(frozen=True)
class ReadAlignment:
    query_name: str
    read: NamedRead
    orientation: str
    result: AlignmentResult
    stats: AlignmentStats

    @property
    def quality(self) -> Optional[str]:
        if self.read.quality is None or len(self.result) == 0:
            return None
        start, stop = self.result.y_indices
        return self.read.quality[start:stop + 1]

def _percent(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100.0

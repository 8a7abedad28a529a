import logging
from dataclasses import dataclass, field

import numpy as np

from autosw.engine.analysis.substitution import SubstitutionScorer
from autosw.engine.exceptions.alignment import EmptyInputException, EmptyMatrixException, TracebackInvariantViolationException
from autosw.engine.structures.configuration import MAX_GAP_PENALTY

LOGGER = logging.getLogger(__name__)

GAP = "-"


def score_matrix(sequence_x: str, sequence_y: str, substitution: SubstitutionScorer, gap_penalty: int) -> np.ndarray:
    """Fill the Smith-Waterman score matrix of ``sequence_x`` against ``sequence_y``.

    ``H[i, j] = max(0, H[i-1, j-1] + s(x_i, y_j), H[i-1, j] - g, H[i, j-1] - g)``
    where every predecessor outside of the matrix counts as 0. The returned
    matrix has shape ``(len(sequence_x), len(sequence_y))`` and dtype int64.
    """
    if len(sequence_x) == 0:
        raise EmptyInputException("X")
    if len(sequence_y) == 0:
        raise EmptyInputException("Y")
    if gap_penalty < 0 or gap_penalty > MAX_GAP_PENALTY:
        raise ValueError(f"The gap penalty must be an integer between 0 and {MAX_GAP_PENALTY} (got {gap_penalty}).")

    len_x = len(sequence_x)
    len_y = len(sequence_y)
    LOGGER.debug("Filling a %d x %d score matrix.", len_x, len_y)

    substitution_rows: dict[str, np.ndarray] = dict()
    for symbol_x in dict.fromkeys(sequence_x):
        substitution_rows[symbol_x] = np.fromiter(
            (substitution(symbol_x, symbol_y) for symbol_y in sequence_y),
            dtype=np.int64, count=len_y)

    # No cell can exceed max|s| * min(len_x, len_y), so any larger penalty behaves
    # exactly like that bound plus one and the gap offsets stay within int64.
    score_bound = max(int(np.abs(row).max()) for row in substitution_rows.values()) * min(len_x, len_y)
    effective_penalty = min(gap_penalty, score_bound + 1)

    matrix = np.zeros((len_x, len_y), dtype=np.int64)
    gap_offsets = np.arange(len_y, dtype=np.int64) * effective_penalty
    previous_row = np.zeros(len_y, dtype=np.int64)
    up_left = np.zeros(len_y, dtype=np.int64)

    for i, symbol_x in enumerate(sequence_x):
        substitution_row = substitution_rows[symbol_x]
        up_left[1:] = previous_row[:-1]
        candidates = np.maximum(up_left + substitution_row, previous_row - effective_penalty)
        np.maximum(candidates, 0, out=candidates)

        # H[j] = max(c[j], H[j-1] - g) unrolls to max over k <= j of c[k] - g * (j - k)
        row = np.maximum.accumulate(candidates + gap_offsets) - gap_offsets
        matrix[i] = row
        previous_row = row

    return matrix


def locate_best(matrix: np.ndarray) -> tuple[int, int, int]:
    """Return ``(score, i, j)`` of the highest cell.

    Ties go to the first cell in row-major order.
    """
    if matrix.ndim != 2 or matrix.shape[0] == 0 or matrix.shape[1] == 0:
        raise EmptyMatrixException(matrix.shape)
    # argmax reports the first occurrence of the maximum in C order
    i, j = np.unravel_index(int(np.argmax(matrix)), matrix.shape)
    return int(matrix[i, j]), int(i), int(j)


@dataclass
class _TracebackState:
    i: int
    j: int
    trace_x: list[str] = field(default_factory=list)
    trace_y: list[str] = field(default_factory=list)

    def emit(self, symbol_x: str, symbol_y: str):
        self.trace_x.append(symbol_x)
        self.trace_y.append(symbol_y)

    def alignment(self) -> tuple[str, str]:
        return "".join(reversed(self.trace_x)), "".join(reversed(self.trace_y))


def trace(sequence_x: str, sequence_y: str, matrix: np.ndarray, start_i: int, start_j: int,
          substitution: SubstitutionScorer, gap_penalty: int) -> tuple[str, str, int, int]:
    """Walk back from ``(start_i, start_j)`` and rebuild the local alignment.

    At every cell the horizontal, diagonal and vertical predecessors are tried
    in that order and the first one reproducing the cell's score is taken. The
    walk ends on a diagonal step from a zero cell, or on reaching the first row
    or column, in which case that cell is aligned as a pair.

    Returns the two aligned strings and the indices of the cell the walk ended on.
    """
    if len(sequence_x) == 0:
        raise EmptyInputException("X")
    if len(sequence_y) == 0:
        raise EmptyInputException("Y")

    state = _TracebackState(start_i, start_j)
    score = int(matrix[start_i, start_j])

    while score != 0:
        i = state.i
        j = state.j
        if i == 0 or j == 0:
            state.emit(sequence_x[i], sequence_y[j])
            break

        left = int(matrix[i, j - 1])
        up_left = int(matrix[i - 1, j - 1])
        up = int(matrix[i - 1, j])

        if left - gap_penalty == score:
            state.emit(GAP, sequence_y[j])
            state.j = j - 1
            score = left
        elif up_left + substitution(sequence_x[i], sequence_y[j]) == score:
            state.emit(sequence_x[i], sequence_y[j])
            if up_left == 0:
                break
            state.i = i - 1
            state.j = j - 1
            score = up_left
        elif up - gap_penalty == score:
            state.emit(sequence_x[i], GAP)
            state.i = i - 1
            score = up
        else:
            raise TracebackInvariantViolationException(i, j, score, left, up_left, up)

    aligned_x, aligned_y = state.alignment()
    return aligned_x, aligned_y, state.i, state.j

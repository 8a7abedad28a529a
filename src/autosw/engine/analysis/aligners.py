import logging
import time
from typing import Any, AsyncGenerator, AsyncIterable

from autosw.engine.analysis.complement import reverse_complement
from autosw.engine.analysis.smith_waterman import locate_best, score_matrix, trace
from autosw.engine.analysis.statistics import alignment_statistics
from autosw.engine.analysis.substitution import EDNAFULL, SubstitutionScorer
from autosw.engine.exceptions.alignment import AlignmentException
from autosw.engine.structures.alignment import FORWARD, REVERSE_COMPLEMENT, AlignmentResult, ReadAlignment
from autosw.engine.structures.configuration import DEFAULT_GAP_PENALTY, MAX_GAP_PENALTY
from autosw.engine.structures.genomics import NamedRead, NamedString

LOGGER = logging.getLogger(__name__)

PROGRESS_INTERVAL = 256


class LinearGapSmithWatermanAligner:
    def __init__(self, substitution: SubstitutionScorer = EDNAFULL, gap_penalty: int = DEFAULT_GAP_PENALTY):
        if gap_penalty < 0 or gap_penalty > MAX_GAP_PENALTY:
            raise ValueError(f"The gap penalty must be an integer between 0 and {MAX_GAP_PENALTY} (got {gap_penalty}).")
        self._substitution = substitution
        self._gap_penalty = gap_penalty

    @property
    def substitution(self) -> SubstitutionScorer:
        return self._substitution

    @property
    def gap_penalty(self) -> int:
        return self._gap_penalty

    def align(self, sequence_x: str, sequence_y: str) -> AlignmentResult:
        matrix = score_matrix(sequence_x, sequence_y, self._substitution, self._gap_penalty)
        best_score, stop_x, stop_y = locate_best(matrix)
        aligned_x, aligned_y, start_x, start_y = trace(
            sequence_x, sequence_y, matrix, stop_x, stop_y, self._substitution, self._gap_penalty)
        del matrix
        return AlignmentResult(
            best_score,
            aligned_x,
            aligned_y,
            (start_x, stop_x),
            (start_y, stop_y)
        )


class ReadAlignmentEngine:
    """Aligns reads against both strands of a single query, one read at a time."""

    def __init__(self, query: NamedString, aligner: LinearGapSmithWatermanAligner):
        self._query = query
        self._aligner = aligner
        self._query_reverse_complement = reverse_complement(query.sequence)

    @property
    def query(self) -> NamedString:
        return self._query

    @property
    def aligner(self) -> LinearGapSmithWatermanAligner:
        return self._aligner

    def align_read(self, read: NamedRead) -> tuple[ReadAlignment, ReadAlignment]:
        forward = self._read_alignment(read, FORWARD, self._query.sequence)
        reverse = self._read_alignment(read, REVERSE_COMPLEMENT, self._query_reverse_complement)
        return forward, reverse

    def _read_alignment(self, read: NamedRead, orientation: str, query_sequence: str) -> ReadAlignment:
        result = self._aligner.align(query_sequence, read.sequence)
        return ReadAlignment(
            query_name=self._query.name,
            read=read,
            orientation=orientation,
            result=result,
            stats=alignment_statistics(result.aligned_x, result.aligned_y)
        )

    async def align_reads(self, reads: AsyncIterable[NamedRead]) -> AsyncGenerator[ReadAlignment, Any]:
        start_time = time.monotonic()
        parsed = 0
        async for read in reads:
            parsed += 1
            try:
                alignments = self.align_read(read)
            except AlignmentException as e:
                LOGGER.warning("Skipping read \"%s\": %s", read.name, e)
            else:
                for alignment in alignments:
                    yield alignment
            if parsed % PROGRESS_INTERVAL == 0:
                _log_progress(start_time, parsed)
        _log_progress(start_time, parsed)


def _log_progress(start_time: float, parsed: int):
    LOGGER.info("[%11.2f seconds]: %d sequences parsed", time.monotonic() - start_time, parsed)

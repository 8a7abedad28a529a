from autosw.engine.analysis.smith_waterman import GAP
from autosw.engine.structures.alignment import AlignmentStats


def alignment_statistics(aligned_x: str, aligned_y: str) -> AlignmentStats:
    """Count identities, gaps and mismatches of two aligned strings.

    A column holding a gap in both strings counts as a gap in each string
    and as a mismatch, so ``identical + mismatches`` is always the length.
    """
    if len(aligned_x) != len(aligned_y):
        raise ValueError(f"Aligned strings must have equal lengths (got {len(aligned_x)} and {len(aligned_y)}).")
    identical = 0
    gaps_x = 0
    gaps_y = 0
    mismatches = 0
    for symbol_x, symbol_y in zip(aligned_x, aligned_y):
        if symbol_x == symbol_y:
            if symbol_x == GAP:
                gaps_x += 1
                gaps_y += 1
                mismatches += 1
            else:
                identical += 1
        else:
            if symbol_x == GAP:
                gaps_x += 1
            elif symbol_y == GAP:
                gaps_y += 1
            mismatches += 1
    return AlignmentStats(identical, gaps_x, gaps_y, mismatches)

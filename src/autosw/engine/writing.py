import csv
from datetime import datetime
from os import PathLike
from typing import AsyncIterable, Optional, Union

from autosw.engine.analysis.smith_waterman import GAP
from autosw.engine.structures.alignment import REVERSE_COMPLEMENT, ReadAlignment

PROGRAM_NAME = "autosw"
REVERSE_COMPLEMENT_PREFIX = "Reverse_Complement_"
PAIR_SECTION_WIDTH = 50

TSV_HEADER = [
    "Reference Sequence Identifier",
    "Sequence Identifier",
    "Smith-Waterman Score",
    "Linear Gap Penalty",
    "Substitution Matrix",
    "Alignment Length",
    "Alignment Identities",
    "Alignment Gaps",
    "Alignment Mismatches",
    "Reference Sequence Alignment",
    "Sequence Alignment",
    "Sequence Alignment Base Quality"
]


def reference_name(alignment: ReadAlignment) -> str:
    if alignment.orientation == REVERSE_COMPLEMENT:
        return REVERSE_COMPLEMENT_PREFIX + alignment.query_name
    return alignment.query_name

def alignment_to_tsv_row(alignment: ReadAlignment, gap_penalty: int, matrix_name: str) -> list[str]:
    return [
        reference_name(alignment),
        alignment.read.name,
        str(alignment.result.score),
        str(gap_penalty),
        matrix_name,
        str(len(alignment.result)),
        str(alignment.stats.identical),
        str(alignment.stats.gaps),
        str(alignment.stats.mismatches),
        alignment.result.aligned_x,
        alignment.result.aligned_y,
        alignment.quality or ""
    ]

async def write_alignments_as_tsv(alignments: AsyncIterable[ReadAlignment], handle: Union[str, bytes, PathLike[str], PathLike[bytes]], gap_penalty: int, matrix_name: str) -> int:
    rows_written = 0
    with open(handle, "w", newline='') as filehandle:
        writer = csv.writer(filehandle, delimiter="\t", lineterminator="\n")
        writer.writerow(TSV_HEADER)
        async for alignment in alignments:
            writer.writerow(alignment_to_tsv_row(alignment, gap_penalty, matrix_name))
            filehandle.flush()
            rows_written += 1
    return rows_written

def format_pair_alignment(alignment: ReadAlignment, gap_penalty: int, matrix_name: str, rundate: Optional[datetime] = None) -> str:
    """Render one alignment as an EMBOSS ``pair`` block."""
    rundate = rundate or datetime.now()
    stats = alignment.stats
    result = alignment.result
    query_name = reference_name(alignment)
    read_name = alignment.read.name
    length = len(result)

    lines = [
        "########################################",
        f"# Program:  {PROGRAM_NAME}",
        f"# Rundate:  {rundate.strftime('%a %b %d %H:%M:%S %Y')}",
        "# Report_file: stdout",
        "########################################",
        "#=======================================",
        "#",
        "# Aligned_sequences: 2",
        f"# 1: {query_name}",
        f"# 2: {read_name}",
        f"# Matrix: {matrix_name}",
        f"# Gap_penalty: {gap_penalty}.0",
        f"# Extend_penalty: {gap_penalty}.0",
        "#",
        f"# Length: {length}",
        f"# Identity:   {stats.identical:>20}/{length} ({stats.percent_identity:.1f}%)",
        f"# Similarity: {stats.identical:>20}/{length} ({stats.percent_identity:.1f}%)",
        f"# Gaps:       {stats.gaps:>20}/{length} ({stats.percent_gaps:.1f}%)",
        f"# Mismatches: {stats.mismatches:>20}/{length} ({stats.percent_mismatches:.1f}%)",
        f"# Score: {result.score}",
        "#",
        "#",
        "#=======================================",
    ]
    text = "\n".join(lines) + "\n"

    name_width = max(len(query_name), len(read_name))
    # positions are 1-based coordinates into the aligned sequences
    position_x = result.x_indices[0]
    position_y = result.y_indices[0]
    for section_start in range(0, length, PAIR_SECTION_WIDTH):
        section_x = result.aligned_x[section_start:section_start + PAIR_SECTION_WIDTH]
        section_y = result.aligned_y[section_start:section_start + PAIR_SECTION_WIDTH]
        first_x, position_x = _section_positions(section_x, position_x)
        first_y, position_y = _section_positions(section_y, position_y)
        text += "\n\n"
        text += f"{query_name:<{name_width}} {first_x:>20} {section_x} {position_x:>20}\n"
        text += " " * (name_width + 22) + _match_line(section_x, section_y) + "\n"
        text += f"{read_name:<{name_width}} {first_y:>20} {section_y} {position_y:>20}\n"

    text += "\n\n#---------------------------------------\n#---------------------------------------\n"
    return text

async def write_alignments_as_pair(alignments: AsyncIterable[ReadAlignment], handle: Union[str, bytes, PathLike[str], PathLike[bytes]], gap_penalty: int, matrix_name: str) -> int:
    blocks_written = 0
    with open(handle, "w") as filehandle:
        async for alignment in alignments:
            filehandle.write(format_pair_alignment(alignment, gap_penalty, matrix_name))
            filehandle.flush()
            blocks_written += 1
    return blocks_written

def _section_positions(section: str, previous: int) -> tuple[int, int]:
    current = previous + sum(1 for symbol in section if symbol != GAP)
    # a section made only of gaps does not advance its left coordinate
    first = previous + 1 if current > previous else previous
    return first, current

def _match_line(section_x: str, section_y: str) -> str:
    return "".join("|" if symbol_x == symbol_y and symbol_x != GAP else " " for symbol_x, symbol_y in zip(section_x, section_y))

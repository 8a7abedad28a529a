import tempfile
from csv import reader
from datetime import datetime
from os import path

import pytest

from autosw.engine.analysis.aligners import LinearGapSmithWatermanAligner, ReadAlignmentEngine
from autosw.engine.structures.alignment import AlignmentResult, AlignmentStats, ReadAlignment
from autosw.engine.structures.genomics import NamedRead, NamedString
from autosw.engine.writing import TSV_HEADER, alignment_to_tsv_row, format_pair_alignment, write_alignments_as_pair, write_alignments_as_tsv

async def iterable_to_asynciterable(iterable):
    for iterated in iterable:
        yield iterated

@pytest.fixture
def read_1_alignments():
    engine = ReadAlignmentEngine(NamedString("query_gene", "ACGTACGTTAGC"), LinearGapSmithWatermanAligner())
    return engine.align_read(NamedRead("read_1", "ACGTACGT", "ABCDEFGH"))

def test_tsv_row(read_1_alignments):
    forward, reverse = read_1_alignments
    assert alignment_to_tsv_row(forward, 16, "NUC.4.4") == [
        "query_gene", "read_1", "40", "16", "NUC.4.4", "8", "8", "0", "0", "ACGTACGT", "ACGTACGT", "ABCDEFGH"
    ]
    assert alignment_to_tsv_row(reverse, 16, "NUC.4.4")[0] == "Reverse_Complement_query_gene"

def test_tsv_row_of_empty_alignment():
    alignment = ReadAlignment("query_gene", NamedRead("read_9", "TTTT", "IIII"), "forward",
                              AlignmentResult(0, "", "", (0, 0), (0, 0)), AlignmentStats(0, 0, 0, 0))
    row = alignment_to_tsv_row(alignment, 16, "NUC.4.4")
    assert row[2] == "0"
    assert row[5] == "0"
    assert row[-1] == ""

async def test_write_alignments_as_tsv(read_1_alignments):
    with tempfile.TemporaryDirectory() as temp_dir:
        output_path = path.join(temp_dir, "reads.fastq.sw.tsv")
        rows_written = await write_alignments_as_tsv(iterable_to_asynciterable(read_1_alignments), output_path, 16, "NUC.4.4")
        assert rows_written == 2
        with open(output_path) as tsv_handle:
            lines = list(reader(tsv_handle, delimiter="\t"))
        assert lines[0] == TSV_HEADER
        assert len(lines) == 3
        assert lines[1][:3] == ["query_gene", "read_1", "40"]
        assert lines[2][0] == "Reverse_Complement_query_gene"

def test_format_pair_alignment(read_1_alignments):
    forward, _ = read_1_alignments
    text = format_pair_alignment(forward, 16, "NUC.4.4", rundate=datetime(2019, 5, 1, 12, 30, 0))
    lines = text.split("\n")
    assert "# Rundate:  Wed May 01 12:30:00 2019" in lines
    assert "# 1: query_gene" in lines
    assert "# 2: read_1" in lines
    assert "# Matrix: NUC.4.4" in lines
    assert "# Gap_penalty: 16.0" in lines
    assert "# Length: 8" in lines
    assert "# Identity:   " + " " * 19 + "8/8 (100.0%)" in lines
    assert "# Score: 40" in lines
    assert "query_gene" + " " * 20 + "1 ACGTACGT" + " " * 20 + "8" in lines
    assert " " * 32 + "||||||||" in lines
    assert "read_1" + " " * 24 + "1 ACGTACGT" + " " * 20 + "8" in lines
    assert text.endswith("#---------------------------------------\n#---------------------------------------\n")

def test_format_pair_alignment_uses_sequence_coordinates(read_1_alignments):
    _, reverse = read_1_alignments
    text = format_pair_alignment(reverse, 16, "NUC.4.4")
    name = "Reverse_Complement_query_gene"
    assert name + " " * 20 + "5 ACGTACGT" + " " * 19 + "12" in text.split("\n")

def test_format_pair_alignment_sections():
    aligned_x = "A" * 60
    aligned_y = "A" * 30 + "-" * 5 + "A" * 25
    alignment = ReadAlignment("q", NamedRead("r", "A" * 55, None), "forward",
                              AlignmentResult(100, aligned_x, aligned_y, (0, 59), (0, 54)), AlignmentStats(55, 0, 5, 5))
    lines = format_pair_alignment(alignment, 16, "NUC.4.4").split("\n")
    assert "q" + " " * 20 + "1 " + "A" * 50 + " " * 19 + "50" in lines
    assert "r" + " " * 20 + "1 " + "A" * 30 + "-" * 5 + "A" * 15 + " " * 19 + "45" in lines
    assert "q" + " " * 19 + "51 " + "A" * 10 + " " * 19 + "60" in lines
    assert "r" + " " * 19 + "46 " + "A" * 10 + " " * 19 + "55" in lines
    assert " " * 23 + "|" * 30 + " " * 5 + "|" * 15 in lines

async def test_write_alignments_as_pair(read_1_alignments):
    with tempfile.TemporaryDirectory() as temp_dir:
        output_path = path.join(temp_dir, "reads.fastq.sw.pair")
        blocks_written = await write_alignments_as_pair(iterable_to_asynciterable(read_1_alignments), output_path, 16, "NUC.4.4")
        assert blocks_written == 2
        with open(output_path) as pair_handle:
            text = pair_handle.read()
        assert text.count("# Program:  autosw") == 2
        assert "# 1: Reverse_Complement_query_gene" in text

import pytest

from autosw.engine.reading import read_fasta, read_fastq, read_query
from autosw.engine.structures.genomics import NamedRead, NamedString

async def test_fasta_reader_uses_first_token_as_name():
    named_strings = [named_string async for named_string in read_fasta("tests/resources/query.fasta")]
    assert named_strings == [NamedString("query_gene", "ACGTACGTTAGC")]

async def test_read_query_returns_first_record():
    query = await read_query("tests/resources/query.fasta")
    assert query.name == "query_gene"
    assert query.sequence == "ACGTACGTTAGC"

async def test_read_query_without_records(tmp_path):
    empty_fasta = tmp_path / "empty.fasta"
    empty_fasta.write_text("")
    with pytest.raises(ValueError):
        await read_query(str(empty_fasta))

async def test_fastq_reader_keeps_raw_quality():
    reads = [read async for read in read_fastq("tests/resources/reads.fastq")]
    assert [read.name for read in reads] == ["read_1", "read_2", "read_3"]
    assert reads[0] == NamedRead("read_1", "ACGTACGT", "ABCDEFGH")
    assert reads[1].sequence == "ACGZACGT"

async def test_fastq_reader_accepts_handles():
    with open("tests/resources/reads.fastq") as fastq_handle:
        reads = [read async for read in read_fastq(fastq_handle)]
    assert len(reads) == 3

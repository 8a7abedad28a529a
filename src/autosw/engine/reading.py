import asyncio
from io import TextIOWrapper
from typing import Any, AsyncGenerator, Union

from Bio import SeqIO
from Bio.SeqIO.QualityIO import FastqGeneralIterator

from autosw.engine.structures.genomics import NamedRead, NamedString


async def read_fasta(handle: Union[str, TextIOWrapper]) -> AsyncGenerator[NamedString, Any]:
    fasta_sequences = asyncio.to_thread(_biopython_read_fasta, handle)
    for fasta_sequence in await fasta_sequences:
        yield NamedString(fasta_sequence.id, str(fasta_sequence.seq))

async def read_query(handle: Union[str, TextIOWrapper]) -> NamedString:
    async for named_string in read_fasta(handle):
        return named_string
    raise ValueError(f"No FASTA records could be read from \"{handle}\".")

async def read_fastq(handle: Union[str, TextIOWrapper]) -> AsyncGenerator[NamedRead, Any]:
    fastq_records = asyncio.to_thread(_biopython_read_fastq, handle)
    for title, sequence, quality in await fastq_records:
        yield NamedRead(_first_token(title), sequence, quality)

def _biopython_read_fasta(handle: Union[str, TextIOWrapper]):
    return list(SeqIO.parse(handle, format="fasta"))

def _biopython_read_fastq(handle: Union[str, TextIOWrapper]) -> list[tuple[str, str, str]]:
    if isinstance(handle, str):
        with open(handle, "r") as fastq_handle:
            return list(FastqGeneralIterator(fastq_handle))
    return list(FastqGeneralIterator(handle))

def _first_token(title: str) -> str:
    tokens = title.split(maxsplit=1)
    return tokens[0] if tokens else title

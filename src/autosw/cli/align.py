import asyncio
import logging
from os import path

from autosw.cli import program
from autosw.engine.analysis.aligners import LinearGapSmithWatermanAligner, ReadAlignmentEngine
from autosw.engine.analysis.substitution import load_substitution_table
from autosw.engine.exceptions.alignment import AlignmentException, EmptyInputException
from autosw.engine.reading import read_fastq, read_query
from autosw.engine.structures.configuration import DEFAULT_GAP_PENALTY, OUTPUT_FORMATS, AlignmentConfiguration
from autosw.engine.writing import write_alignments_as_pair, write_alignments_as_tsv

LOGGER = logging.getLogger(__name__)

FASTQ_EXTENSIONS = (".fq", ".fastq")

parser = program.subparsers.add_parser(
    "align",
    help="Align every read of a FASTQ file against a query sequence and its reverse complement."
)

parser.add_argument(
    "--query", "-q",
    dest="query",
    required=True,
    type=str,
    help="The FASTA file holding the query sequence. Only the first record is used."
)

parser.add_argument(
    "--gap-penalty", "-P",
    dest="gap_penalty",
    required=False,
    default=DEFAULT_GAP_PENALTY,
    type=int,
    help=f"The linear gap penalty (default {DEFAULT_GAP_PENALTY})."
)

parser.add_argument(
    "--type",
    dest="output_format",
    required=False,
    default="tsv",
    choices=OUTPUT_FORMATS,
    help="The output format: tab separated values (tsv, default) or pair-wise alignments (pair)."
)

parser.add_argument(
    "--out", "-o",
    dest="out",
    required=False,
    default=None,
    type=str,
    help="The output path. Defaults to the FASTQ path with \".sw.tsv\" or \".sw.pair\" appended."
)

parser.add_argument(
    "--quiet",
    dest="quiet",
    action="store_true",
    default=False,
    help="Only log warnings and errors."
)

parser.add_argument(
    "fastq",
    help="The FASTQ file holding the reads to align."
)


def default_output_path(fastq_path: str, output_format: str) -> str:
    return f"{fastq_path}.sw.{output_format}"

def is_fastq_path(fastq_path: str) -> bool:
    return path.splitext(fastq_path)[1].lower() in FASTQ_EXTENSIONS

async def run(args, configuration: AlignmentConfiguration):
    query = await read_query(args.query)
    LOGGER.info("Query Sequence Identifier: %s", query.name)
    substitution_table = load_substitution_table(configuration.substitution_matrix)
    if not query.sequence:
        raise EmptyInputException(query.name)
    substitution_table.validate(query.sequence)

    engine = ReadAlignmentEngine(query, LinearGapSmithWatermanAligner(substitution_table, configuration.gap_penalty))
    alignments = engine.align_reads(read_fastq(args.fastq))
    output_path = args.out or default_output_path(args.fastq, configuration.output_format)
    if configuration.output_format == "pair":
        LOGGER.info("Writing pair-wise sequence alignments to \"%s\"", output_path)
        await write_alignments_as_pair(alignments, output_path, configuration.gap_penalty, substitution_table.name)
    else:
        LOGGER.info("Writing tab separated values to \"%s\"", output_path)
        await write_alignments_as_tsv(alignments, output_path, configuration.gap_penalty, substitution_table.name)
    return output_path

def run_asynchronously(args):
    if not is_fastq_path(args.fastq):
        parser.error(f"could not find expected FASTQ file (expected a {' or '.join(FASTQ_EXTENSIONS)} extension): {args.fastq}")
    try:
        configuration = AlignmentConfiguration.from_arguments(args)
    except ValueError as e:
        parser.error(str(e))
    program.configure_logging(args.quiet)
    try:
        asyncio.run(run(args, configuration))
    except AlignmentException as e:
        parser.exit(1, f"{parser.prog}: error: query sequence \"{args.query}\": {e}\n")
    except ValueError as e:
        parser.error(str(e))

parser.set_defaults(func=run_asynchronously)

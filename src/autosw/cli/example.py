from autosw.cli import program
from autosw.engine.analysis.smith_waterman import locate_best, score_matrix, trace
from autosw.engine.analysis.substitution import MatchMismatchScorer
from autosw.engine.structures.configuration import MAX_GAP_PENALTY

EXAMPLE_X = "GGTTGACTA"
EXAMPLE_Y = "TGTTACGG"

parser = program.subparsers.add_parser(
    "example",
    help="Run the worked example: GGTTGACTA against TGTTACGG scoring +3 for a match and -3 for a mismatch."
)

parser.add_argument(
    "--gap-penalty", "-P",
    dest="gap_penalty",
    required=False,
    default=2,
    type=int,
    help="The linear gap penalty (default 2)."
)


def run(args):
    if args.gap_penalty < 0 or args.gap_penalty > MAX_GAP_PENALTY:
        parser.error(f"the gap penalty must be an integer between 0 and {MAX_GAP_PENALTY}")
    substitution = MatchMismatchScorer(match=3, mismatch=-3)
    matrix = score_matrix(EXAMPLE_X, EXAMPLE_Y, substitution, args.gap_penalty)

    print("Scoring Matrix:")
    for row in matrix:
        print(" ".join(f"{int(score):2d}" for score in row))

    best_score, best_i, best_j = locate_best(matrix)
    print(f"Best Indices: ({best_i}, {best_j})")

    aligned_x, aligned_y, final_i, final_j = trace(EXAMPLE_X, EXAMPLE_Y, matrix, best_i, best_j, substitution, args.gap_penalty)
    print(f"Best Indices: ({final_i}, {final_j})")
    print(f"Score: {best_score}")
    print(f"Alignments:\n{aligned_x}\n{aligned_y}")

parser.set_defaults(func=run)

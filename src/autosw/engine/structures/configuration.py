from dataclasses import dataclass

DEFAULT_GAP_PENALTY = 16
DEFAULT_SUBSTITUTION_MATRIX = "NUC.4.4"
OUTPUT_FORMATS = ("tsv", "pair")
# scores are held in int64 matrices
MAX_GAP_PENALTY = 2**63 - 1

@dataclass(frozen=True)
class AlignmentConfiguration:
    gap_penalty: int = DEFAULT_GAP_PENALTY
    substitution_matrix: str = DEFAULT_SUBSTITUTION_MATRIX
    output_format: str = "tsv"

    def __post_init__(self):
        if self.gap_penalty < 0 or self.gap_penalty > MAX_GAP_PENALTY:
            raise ValueError(f"The gap penalty must be an integer between 0 and {MAX_GAP_PENALTY} (got {self.gap_penalty}).")
        if self.substitution_matrix != DEFAULT_SUBSTITUTION_MATRIX:
            raise ValueError(f"Unsupported substitution matrix \"{self.substitution_matrix}\" (only \"{DEFAULT_SUBSTITUTION_MATRIX}\" is available).")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format \"{self.output_format}\" (valid formats are {', '.join(OUTPUT_FORMATS)}).")

    @classmethod
    def from_arguments(cls, args) -> "AlignmentConfiguration":
        return cls(
            gap_penalty=args.gap_penalty,
            substitution_matrix=getattr(args, "substitution_matrix", DEFAULT_SUBSTITUTION_MATRIX),
            output_format=args.output_format
        )

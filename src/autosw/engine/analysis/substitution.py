from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Mapping

from Bio.Align import substitution_matrices

from autosw.engine.exceptions.alignment import InvalidSymbolException

# Any callable (a, b) -> int can score substitutions.
SubstitutionScorer = Callable[[str, str], int]


class SubstitutionTable:
    """An immutable substitution score lookup keyed by pairs of symbols.

    Symbols are matched case-insensitively. Pairs that are not in the table
    raise ``InvalidSymbolException`` instead of scoring as zero.
    """

    def __init__(self, name: str, scores: Mapping[tuple[str, str], int]):
        self._name = name
        self._scores = MappingProxyType({(a.upper(), b.upper()): int(score) for (a, b), score in scores.items()})
        self._alphabet = frozenset(symbol for pair in self._scores for symbol in pair)

    @property
    def name(self) -> str:
        return self._name

    @property
    def alphabet(self) -> frozenset[str]:
        return self._alphabet

    @property
    def scores(self) -> Mapping[tuple[str, str], int]:
        return self._scores

    def score(self, a: str, b: str) -> int:
        key = (a.upper(), b.upper())
        if key not in self._scores:
            raise InvalidSymbolException(b if a in self else a)
        return self._scores[key]

    def validate(self, sequence: str):
        for position, symbol in enumerate(sequence):
            if symbol not in self:
                raise InvalidSymbolException(symbol, position)

    def __call__(self, a: str, b: str) -> int:
        return self.score(a, b)

    def __contains__(self, symbol) -> bool:
        return isinstance(symbol, str) and symbol.upper() in self._alphabet

    def __repr__(self):
        return f"{type(self).__name__}({self._name!r})"


class MatchMismatchScorer:
    """Scores identical symbols with ``match`` and everything else with ``mismatch``."""

    def __init__(self, match: int = 3, mismatch: int = -3):
        self.match = match
        self.mismatch = mismatch

    def __call__(self, a: str, b: str) -> int:
        return self.match if a == b else self.mismatch


@lru_cache(maxsize=None)
def load_substitution_table(name: str = "NUC.4.4") -> SubstitutionTable:
    # Biopython ships EDNAFULL as NUC.4.4
    biopython_matrix = substitution_matrices.load(name)
    alphabet = biopython_matrix.alphabet
    scores = {(a, b): int(biopython_matrix[a, b]) for a in alphabet for b in alphabet}
    return SubstitutionTable(name, scores)


EDNAFULL = load_substitution_table("NUC.4.4")

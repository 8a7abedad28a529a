from autosw.engine.exceptions.alignment import InvalidSymbolException

_COMPLEMENTS = {
    "A": "T", "T": "A", "U": "A",
    "C": "G", "G": "C",
    "B": "V", "V": "B",
    "D": "H", "H": "D",
    "M": "K", "K": "M",
    "R": "Y", "Y": "R",
    "S": "S", "W": "W", "N": "N",
}
COMPLEMENT_TABLE = str.maketrans({
    **_COMPLEMENTS,
    **{base.lower(): complement.lower() for base, complement in _COMPLEMENTS.items()}
})


def reverse_complement(sequence: str) -> str:
    for position, symbol in enumerate(sequence):
        if ord(symbol) not in COMPLEMENT_TABLE:
            raise InvalidSymbolException(symbol, position)
    return sequence.translate(COMPLEMENT_TABLE)[::-1]

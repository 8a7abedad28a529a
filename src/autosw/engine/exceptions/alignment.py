from typing import Optional, Sequence


class AlignmentException(Exception):
    pass

class InvalidSymbolException(AlignmentException):
    def __init__(self, symbol: str, position: Optional[int] = None, *args):
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"The symbol \"{symbol}\" is not a supported nucleotide symbol."
        else:
            message = f"The symbol \"{symbol}\" at position {position} is not a supported nucleotide symbol."
        super().__init__(message, *args)

class EmptyInputException(AlignmentException):
    def __init__(self, sequence_label: str, *args):
        self.sequence_label = sequence_label
        super().__init__(f"Sequence \"{sequence_label}\" is empty and cannot be aligned.", *args)

class EmptyMatrixException(AlignmentException):
    def __init__(self, shape: Sequence[int], *args):
        self.shape = tuple(shape)
        super().__init__(f"Cannot locate a best score in a score matrix of shape {self.shape}.", *args)

class TracebackInvariantViolationException(RuntimeError):
    def __init__(self, i: int, j: int, current: int, left: int, up_left: int, up: int, *args):
        self.i = i
        self.j = j
        self.current = current
        self.left = left
        self.up_left = up_left
        self.up = up
        super().__init__(
            f"No predecessor of cell ({i}, {j}) reproduces its score {current} "
            f"(left: {left}, up-left: {up_left}, up: {up}). The score matrix was not filled correctly.", *args)

"""Exception hierarchy for the multi-species Game of Life."""


class MultiLifeError(ValueError):
    """Base class for every error raised by multilife."""


class InvalidValueError(MultiLifeError):
    """A value object was built from an out-of-range or non-integer value."""


class InvalidCellError(MultiLifeError):
    """A cell's state and species disagree."""


class InvalidWorldError(MultiLifeError):
    """A world was built from an invalid species count or cell set."""


class NotAliveCellError(InvalidWorldError, InvalidCellError):
    """A dead cell (or a non-cell) was handed to a World as an alive cell."""


class InvalidInputError(MultiLifeError):
    """The simulation input document is missing, malformed or out of range."""


class OutputWritingError(MultiLifeError):
    """The simulation result could not be written."""

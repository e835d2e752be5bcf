"""Exception hierarchy for chess-related failures."""


class ChessError(RuntimeError):
    """Base class for all chess errors."""


class FenParseError(ChessError):
    """A FEN string could not be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"FEN Parse Error: {message}")


class FenValidationError(ChessError):
    """A parsed FEN describes an impossible position."""

    def __init__(self, message: str) -> None:
        super().__init__(f"FEN Validation Error: {message}")
"""Exception types raised by the L-system generator and the turtle interpreter."""


class LSystemError(Exception):
    """Base class for every error raised by this package."""


class GrammarError(LSystemError, ValueError):
    """A production or generation request is invalid."""


class StackUnderflowError(LSystemError, IndexError):
    """A ']' was met while the turtle stack was empty."""

    def __init__(self, index: int, symbol: str = "]"):
        self.index = index
        self.symbol = symbol
        super().__init__(f"unbalanced '{symbol}' at position {index}: turtle stack is empty")


class PresetError(LSystemError, KeyError):
    """Unknown preset name."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""

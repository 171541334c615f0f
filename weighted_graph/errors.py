"""Error types raised by the weighted graph and its loader."""


class GraphError(Exception):
    """Base class for every error raised by this package."""


class _PlainKeyError(KeyError):
    # KeyError quotes its message in str(); keep messages readable.
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class DuplicateVertexError(GraphError, ValueError):
    """Raised when a vertex already exists or is None."""


class VertexNotFoundError(GraphError, _PlainKeyError):
    """Raised when an operation references a vertex that is not in the graph."""


class SelfLoopError(GraphError, ValueError):
    """Raised when an edge would connect a vertex to itself."""


class EdgeNotFoundError(GraphError, _PlainKeyError):
    """Raised when removing an edge that does not exist."""


class GraphFormatError(GraphError, ValueError):
    """
    Raised by the loader when its input does not follow the graph file format.

    Attributes:
        line_number: 1-based line of the input where the problem was found,
            or None when the input ended early.
    """

    def __init__(self, message: str, line_number=None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number

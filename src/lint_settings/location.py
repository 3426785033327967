"""Source location values used to track where a setting came from."""
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A point in a source."""

    line: int
    column: int = 0
    offset: int = 0


@dataclass(frozen=True)
class Loc:
    """A span in a source. Hashable, compared by value."""

    source: str | None
    start: Position
    end: Position


def loc_of_line(index: int) -> Loc:
    """Build the synthetic location of the directive at a given input index.

    Args:
        index: Zero-based position of the directive in its input sequence

    Returns:
        Location spanning line ``index`` up to line ``index + 1``
    """
    return Loc(source=None, start=Position(line=index), end=Position(line=index + 1))

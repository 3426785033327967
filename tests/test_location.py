"""Tests for source locations."""
from lint_settings.location import Loc, Position, loc_of_line


def test_loc_of_line_spans_one_line():
    """Test synthetic locations cover a single line."""
    loc = loc_of_line(3)

    assert loc.source is None
    assert loc.start == Position(line=3, column=0, offset=0)
    assert loc.end == Position(line=4, column=0, offset=0)


def test_locations_compare_by_value():
    """Test equal locations are equal and hash the same."""
    assert loc_of_line(0) == loc_of_line(0)
    assert loc_of_line(0) != loc_of_line(1)
    assert len({loc_of_line(0), loc_of_line(0), loc_of_line(1)}) == 2


def test_loc_with_source():
    """Test locations with a source differ from synthetic ones."""
    loc = Loc(source="a.js", start=Position(line=0), end=Position(line=1))
    assert loc != loc_of_line(0)

"""Tests for the lint kind vocabulary."""
from lint_settings.kinds import ALL_KINDS, LintKind, kind_order, kinds_of_string, string_of_kind


def test_string_of_kind():
    """Test kinds map to their directive names."""
    assert string_of_kind(LintKind.SKETCHY_NULL_BOOL) == "sketchy-null-bool"
    assert string_of_kind(LintKind.SKETCHY_NULL_STRING) == "sketchy-null-string"
    assert string_of_kind(LintKind.SKETCHY_NULL_NUMBER) == "sketchy-null-number"
    assert string_of_kind(LintKind.SKETCHY_NULL_MIXED) == "sketchy-null-mixed"


def test_kinds_of_string_single_name():
    """Test a standalone name resolves to one kind."""
    assert kinds_of_string("sketchy-null-number") == [LintKind.SKETCHY_NULL_NUMBER]


def test_kinds_of_string_group_alias():
    """Test the sketchy-null alias expands to all four kinds in order."""
    assert kinds_of_string("sketchy-null") == [
        LintKind.SKETCHY_NULL_BOOL,
        LintKind.SKETCHY_NULL_STRING,
        LintKind.SKETCHY_NULL_NUMBER,
        LintKind.SKETCHY_NULL_MIXED,
    ]


def test_kinds_of_string_unknown_name():
    """Test unknown names return None."""
    assert kinds_of_string("foo") is None
    assert kinds_of_string("") is None
    assert kinds_of_string("SKETCHY_NULL_BOOL") is None


def test_names_round_trip():
    """Test every kind resolves back from its own name."""
    for kind in ALL_KINDS:
        assert kinds_of_string(string_of_kind(kind)) == [kind]


def test_kind_order_follows_declaration():
    """Test canonical order is declaration order."""
    assert [kind_order(kind) for kind in ALL_KINDS] == [0, 1, 2, 3]

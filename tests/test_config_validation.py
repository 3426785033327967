"""Tests for config validation."""
import pytest
from pydantic import ValidationError

from lint_settings.config import Config


def test_config_keeps_blank_and_comment_lines():
    """Test entries are stored as written so positions stay stable."""
    config = Config(lints=["# global lints", "all=on", "   ", "sketchy-null-bool=off"])

    assert config.lints == ["# global lints", "all=on", "   ", "sketchy-null-bool=off"]


def test_config_rejects_multi_line_entries():
    """Test an entry cannot hold more than one directive line."""
    with pytest.raises(ValidationError, match="lints entry 2 spans more than one line"):
        Config(lints=["all=on", "sketchy-null-bool=off\nsketchy-null-mixed=on"])


def test_config_rejects_non_string_lints():
    """Test lint entries must be strings."""
    with pytest.raises(ValidationError, match="lints"):
        Config(lints=[1, 2])


def test_config_rejects_empty_source_name():
    """Test source name cannot be empty."""
    with pytest.raises(ValidationError, match="source_name"):
        Config(lints=[], source_name="")


def test_config_accepts_valid_values():
    """Test that valid config is accepted."""
    config = Config(lints=["sketchy-null=off"], source_name="global")

    assert config.lints == ["sketchy-null=off"]
    assert config.source_name == "global"

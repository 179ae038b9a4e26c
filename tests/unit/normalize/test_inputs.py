"""Tests for the safe bulk fetch."""

from unittest.mock import Mock

from flowsafe.normalize.inputs import InputSource, StaticSource, safe_input_all


def test_static_source_is_input_source():
    """Test StaticSource satisfies the InputSource protocol."""
    assert isinstance(StaticSource([1]), InputSource)


def test_list_returned_unchanged():
    """Test a list from the source is returned as-is."""
    items = [{"json": {}}, {"json": {}}]
    assert safe_input_all(StaticSource(items)) is items


def test_tuple_converted_to_list():
    """Test tuples become lists."""
    assert safe_input_all(StaticSource(("a", "b"))) == ["a", "b"]


def test_single_item_is_wrapped():
    """Test a single non-sequence item is wrapped."""
    assert safe_input_all(StaticSource({"json": {"x": 1}})) == [{"json": {"x": 1}}]


def test_empty_static_source():
    """Test an empty source."""
    assert safe_input_all(StaticSource()) == []


def test_fetch_failure_returns_empty_list(caplog):
    """Test a failing source gives an empty list instead of raising."""
    source = Mock()
    source.all.side_effect = RuntimeError("upstream node not executed")

    assert safe_input_all(source) == []
    assert "upstream node not executed" in caplog.text

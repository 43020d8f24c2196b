"""
Tests for simple value coercions.
"""

from types import SimpleNamespace

from lunatic.coercion import is_empty, negate, pluck, to_boolean


class TestToBoolean:
    """Test to_boolean."""

    def test_true_any_case(self):
        assert to_boolean("TRUE") is True
        assert to_boolean("True") is True

    def test_false(self):
        assert to_boolean("false") is False

    def test_unknown_is_false(self):
        assert to_boolean("maybe") is False

    def test_non_string_input(self):
        """Non-string input is read as its text form."""
        assert to_boolean(None) is False
        assert to_boolean(True) is True
        assert to_boolean(0) is False


def test_negate():
    assert negate(5) == -5
    assert negate(-2.5) == 2.5


class TestPluck:
    """Test pluck."""

    def test_mapping(self):
        assert pluck("hp")({"hp": 10}) == 10

    def test_missing_key(self):
        assert pluck("mp")({"hp": 10}) is None

    def test_attribute(self):
        assert pluck("hp")(SimpleNamespace(hp=3)) == 3

    def test_with_map(self):
        actors = [{"name": "A"}, {"name": "B"}]
        assert list(map(pluck("name"), actors)) == ["A", "B"]


class TestIsEmpty:
    """Test is_empty."""

    def test_none_is_not_empty(self):
        assert is_empty(None) is False

    def test_empty_containers(self):
        assert is_empty([]) is True
        assert is_empty("") is True
        assert is_empty({}) is True

    def test_filled_containers(self):
        assert is_empty([0]) is False
        assert is_empty("x") is False

    def test_plain_objects(self):
        assert is_empty(SimpleNamespace()) is True
        assert is_empty(SimpleNamespace(a=1)) is False

    def test_numbers(self):
        assert is_empty(0) is False

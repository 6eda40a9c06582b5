"""Tests for macro substitution."""

from knf.macro import expand, has_macros, reference_key, resolve


class TestResolve:
    """Test recursive macro resolution."""

    def test_same_section_reference(self):
        """Test bare references point to the same section."""
        data = {"macro:test1": "100", "macro:test2": "{macro:test1}.50"}

        assert resolve(data, "macro:test2") == "100.50"

    def test_nested_references(self):
        """Test references are resolved depth-first."""
        data = {
            "macro:test1": "100",
            "macro:test2": "{macro:test1}.50",
            "macro:test3": "Value is {macro:test2}",
            "macro:test4": '"{macro:test3}"',
        }

        assert resolve(data, "macro:test3") == "Value is 100.50"
        assert resolve(data, "macro:test4") == '"Value is 100.50"'

    def test_cross_section_reference(self):
        """Test full composite keys reach other sections."""
        data = {
            "paths:root": "/srv/app",
            "logs:dir": "{macro:paths:root}/logs",
        }

        assert resolve(data, "logs:dir") == "/srv/app/logs"

    def test_unknown_tokens_left_verbatim(self):
        """Test unresolvable tokens are kept as-is."""
        data = {
            "m:a": "{ABC}",
            "m:b": "{}",
            "m:c": "{macro:missing}",
            "m:d": "{macro:other:missing} and {macro:a}",
        }

        assert resolve(data, "m:a") == "{ABC}"
        assert resolve(data, "m:b") == "{}"
        assert resolve(data, "m:c") == "{macro:missing}"
        assert resolve(data, "m:d") == "{macro:other:missing} and {ABC}"

    def test_multiple_tokens(self):
        """Test every token in a value is replaced."""
        data = {"s:host": "localhost", "s:port": "80", "s:url": "http://{macro:host}:{macro:port}/"}

        assert resolve(data, "s:url") == "http://localhost:80/"

    def test_empty_reference_substituted(self):
        """Test a reference to an empty value resolves to nothing."""
        data = {"s:a": "", "s:b": "[{macro:a}]"}

        assert resolve(data, "s:b") == "[]"

    def test_self_reference_terminates(self):
        """Test a self-referencing value leaves its token unexpanded."""
        data = {"s:a": "x{macro:a}"}

        assert resolve(data, "s:a") == "x{macro:a}"

    def test_cycle_terminates(self):
        """Test mutual references stop at the first repeated key."""
        data = {"s:a": "A{macro:b}", "s:b": "B{macro:a}"}

        assert resolve(data, "s:a") == "AB{macro:a}"
        assert resolve(data, "s:b") == "BA{macro:b}"

    def test_diamond_is_not_a_cycle(self):
        """Test a key referenced twice on different branches expands both times."""
        data = {"s:base": "1", "s:left": "{macro:base}", "s:top": "{macro:left}{macro:base}"}

        assert resolve(data, "s:top") == "11"

    def test_missing_key(self):
        """Test resolving an absent key returns None."""
        assert resolve({}, "s:a") is None


class TestHelpers:
    """Test macro helper functions."""

    def test_reference_key(self):
        assert reference_key("test1", "macro") == "macro:test1"
        assert reference_key("other:test1", "macro") == "other:test1"

    def test_has_macros(self):
        assert has_macros("{macro:a}")
        assert not has_macros("{ABC}")
        assert not has_macros("plain")

    def test_expand_without_braces(self):
        """Test values without braces are returned unchanged."""
        assert expand({}, "plain text", "s") == "plain text"

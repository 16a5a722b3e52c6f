"""Tests for the escaping primitive."""

import pytest

from domtree import DomError, InvalidCharacter, escape, escape_char


class TestEscapeChar:
    @pytest.mark.parametrize(
        ("char", "expected"),
        [("<", "&lt;"), (">", "&gt;"), ("&", "&amp;"), ('"', "&quot;")],
    )
    def test_special_characters(self, char: str, expected: str) -> None:
        assert escape_char(char) == expected

    @pytest.mark.parametrize("char", ["a", "'", " ", "\n", "é", "="])
    def test_other_characters_unchanged(self, char: str) -> None:
        assert escape_char(char) == char

    def test_rejects_multiple_characters(self) -> None:
        with pytest.raises(InvalidCharacter, match="single character"):
            escape_char("<>")

    @pytest.mark.parametrize("text", ["", "ab"])
    def test_invalid_character_is_dom_error(self, text: str) -> None:
        with pytest.raises(DomError):
            escape_char(text)
        with pytest.raises(ValueError):
            escape_char(text)


class TestEscape:
    def test_safe_text_is_unchanged(self) -> None:
        text = "Plain text, with 'quotes' and unicode: ünïcødé"
        assert escape(text) == text

    def test_order_preserved(self) -> None:
        assert escape('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"

    def test_matches_per_character_rule(self) -> None:
        text = 'if a < b && c > "d"'
        assert escape(text) == "".join(escape_char(c) for c in text)

    def test_existing_entities_are_escaped_again(self) -> None:
        assert escape("&amp;") == "&amp;amp;"

    def test_empty(self) -> None:
        assert escape("") == ""

"""
Unit tests for block comment removal.
"""

import pytest

from namedsql.parser.comments import remove_multi_line_comments


class TestRemoveMultiLineComments:
    """Test blanking of /* ... */ comments."""

    def test_text_without_comments_is_unchanged(self):
        """Test that text without comments comes back as is."""
        assert remove_multi_line_comments("123\nabc") == "123\nabc"

    def test_single_line_comments_become_spaces(self):
        """Test that inline comments are replaced by spaces of the same width."""
        text = "123/*qqq*/ /*123**/ 321"
        assert remove_multi_line_comments(text) == "123" + " " * 17 + "321"

    def test_multi_line_comment_keeps_newlines(self):
        """Test that newlines inside a comment survive."""
        text = "123/*9\nqqq\nz*/321"
        assert remove_multi_line_comments(text) == "123   \n   \n   321"

    def test_carriage_returns_are_kept(self):
        """Test that CRLF line endings inside a comment survive."""
        assert remove_multi_line_comments("a/*x\r\ny*/b") == "a   \r\n   b"

    def test_nested_comment_closes_at_first_terminator(self):
        """Test that the first */ closes the comment."""
        text = "/* a /* b */ c */"
        assert remove_multi_line_comments(text) == " " * 12 + " c */"

    def test_unterminated_comment_is_left_alone(self):
        """Test that an opening /* without */ is not touched."""
        assert remove_multi_line_comments("a /* b\nc") == "a /* b\nc"

    def test_tag_inside_comment_is_blanked(self):
        """Test that a commented-out tag line becomes whitespace."""
        text = "/*\n-- name: hidden\n*/"
        assert remove_multi_line_comments(text).strip() == ""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "SELECT 1;",
            "a/*b*/c",
            "/* one\ntwo */\n-- name: x\nSELECT /* inline */ 1;",
            "/*\r\n*/\r\n/* unterminated",
            "/*/ still open */ after",
        ],
    )
    def test_shape_is_preserved(self, text):
        """Test that length and line count never change."""
        result = remove_multi_line_comments(text)
        assert len(result) == len(text)
        assert result.count("\n") == text.count("\n")
        assert len(result.splitlines()) == len(text.splitlines())

    @pytest.mark.parametrize(
        "text",
        [
            "a/*b*/c",
            "/* /* */ */",
            "x /* 1\n2 */ y /* 3 */",
        ],
    )
    def test_is_idempotent(self, text):
        """Test that normalizing twice gives the same result as once."""
        once = remove_multi_line_comments(text)
        assert remove_multi_line_comments(once) == once

"""Tests for the per-line state machine."""

from superconf.lexer import Token, TokenType, tokenize
from superconf.line_parser import LineParser, ParsedLine, parse_line


def _char(c):
    return Token(TokenType.CHARACTER, c)


SEP = Token(TokenType.SEPARATOR)
BSL = Token(TokenType.BACKSLASH)
HASH = Token(TokenType.COMMENT)


# ---------------------------------------------------------------------------
# LineParser transitions
# ---------------------------------------------------------------------------

class TestTransitions:
    def test_initial_state(self):
        lp = LineParser()
        assert lp.fields == [""]
        assert lp.ignore_special is False
        assert lp.is_comment is False

    def test_character_appends_to_current_field(self):
        lp = LineParser()
        lp.feed(_char("a"))
        lp.feed(_char("b"))
        assert lp.fields == ["ab"]

    def test_separator_after_text_opens_field(self):
        lp = LineParser()
        lp.feed(_char("a"))
        lp.feed(SEP)
        assert lp.fields == ["a", ""]

    def test_separator_on_empty_field_is_collapsed(self):
        lp = LineParser()
        lp.feed(SEP)
        lp.feed(SEP)
        assert lp.fields == [""]

    def test_backslash_toggles(self):
        lp = LineParser()
        lp.feed(BSL)
        assert lp.ignore_special is True
        lp.feed(BSL)
        assert lp.ignore_special is False

    def test_escaped_separator_is_literal(self):
        lp = LineParser()
        lp.feed(_char("a"))
        lp.feed(BSL)
        lp.feed(SEP)
        assert lp.fields == ["a "]
        assert lp.ignore_special is False

    def test_escaped_custom_separator_is_literal(self):
        lp = LineParser(separator=">")
        lp.feed(BSL)
        lp.feed(SEP)
        assert lp.fields == [">"]

    def test_character_clears_escape(self):
        lp = LineParser()
        lp.feed(BSL)
        lp.feed(_char("x"))
        assert lp.ignore_special is False
        assert lp.fields == ["x"]

    def test_comment_stops_processing(self):
        lp = LineParser()
        assert lp.feed(HASH) is False
        assert lp.is_comment is True
        assert lp.feed(_char("a")) is False
        assert lp.fields == [""]

    def test_comment_wins_over_escape(self):
        lp = LineParser()
        lp.feed(BSL)
        lp.feed(HASH)
        assert lp.is_comment is True

    def test_feed_all_stops_at_comment(self):
        lp = LineParser()
        lp.feed_all(tokenize("a b # c d"))
        assert lp.fields == ["a", "b", ""]
        assert lp.finish() is None


# ---------------------------------------------------------------------------
# finish / parse_line
# ---------------------------------------------------------------------------

def test_key_and_single_field():
    assert parse_line("key value") == ParsedLine("key", ["value"])

def test_key_and_many_fields():
    assert parse_line("k a b c") == ParsedLine("k", ["a", "b", "c"])

def test_consecutive_separators_collapse():
    assert parse_line("k   a    b") == ParsedLine("k", ["a", "b"])

def test_leading_separators_ignored():
    assert parse_line("   k v") == ParsedLine("k", ["v"])

def test_trailing_separator_leaves_empty_field():
    assert parse_line("k v ") == ParsedLine("k", ["v", ""])

def test_escaped_spaces():
    assert parse_line("my\\ key this\\ is\\ it") == ParsedLine("my key", ["this is it"])

def test_backslash_never_reaches_output():
    assert parse_line("a\\b c\\\\d") == ParsedLine("ab", ["cd"])

def test_double_backslash_cancels_escape():
    assert parse_line("a\\\\ b") == ParsedLine("a", ["b"])

def test_comment_anywhere_discards_line():
    assert parse_line("my_key my_value # trailing comment") is None
    assert parse_line("key#value") is None

def test_escaped_hash_is_still_comment():
    assert parse_line("key \\#value") is None

def test_bare_key_sets_new_level_flag():
    lp = LineParser()
    lp.feed_all(tokenize("section"))
    assert lp.finish() == ParsedLine("section", [])
    assert lp.expects_new_level is True

def test_key_with_value_clears_new_level_flag():
    lp = LineParser()
    lp.feed_all(tokenize("k v"))
    lp.finish()
    assert lp.expects_new_level is False

def test_blank_line():
    assert parse_line("") == ParsedLine("", [])

def test_custom_separator():
    assert parse_line("arrow>demonstration", ">") == ParsedLine("arrow", ["demonstration"])

def test_space_is_plain_text_with_custom_separator():
    assert parse_line("a b>c d", ">") == ParsedLine("a b", ["c d"])

def test_carriage_return_is_kept():
    assert parse_line("k v\r") == ParsedLine("k", ["v\r"])

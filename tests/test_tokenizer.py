import pytest

from doc_model import InlineTag, LineBreak, Link, Tag, Text, TokenKind
from doc_parser import tokenize


class TestTokenize:
    """Podział tekstu komentarza na tokeny"""

    def test_text(self):
        tokens = tokenize("abc")
        assert len(tokens) == 1
        assert tokens[0].is_text()
        assert tokens[0].value == "abc"

    def test_empty_input(self):
        assert tokenize("") == []

    def test_tag_without_value(self):
        tokens = tokenize("{@def}")
        assert len(tokens) == 1
        assert tokens[0].is_inline_tag()
        assert tokens[0].value == "{@def}"
        assert tokens[0].tag.name == "def"
        assert tokens[0].tag.value == ""

    def test_tag_value_keeps_leading_space(self):
        tokens = tokenize("{@def ghi}")
        assert len(tokens) == 1
        assert tokens[0].value == "{@def ghi}"
        assert tokens[0].tag.name == "def"
        assert tokens[0].tag.value == " ghi"

    def test_tag_value_spans_line_break(self):
        tokens = tokenize("{@def\nghi}")
        assert len(tokens) == 1
        assert tokens[0].is_inline_tag()
        assert tokens[0].value == "{@def\nghi}"
        assert tokens[0].tag.name == "def"
        assert tokens[0].tag.value == "\nghi"

    def test_sequence(self):
        tokens = tokenize("abc{@def}\nghi{@jkl mno}\n")
        assert [t.kind for t in tokens] == [
            TokenKind.TEXT,
            TokenKind.INLINE_TAG,
            TokenKind.LINE_BREAK,
            TokenKind.TEXT,
            TokenKind.INLINE_TAG,
            TokenKind.LINE_BREAK,
        ]
        assert [t.value for t in tokens] == [
            "abc", "{@def}", "\n", "ghi", "{@jkl mno}", "\n",
        ]
        assert (tokens[1].tag.name, tokens[1].tag.value) == ("def", "")
        assert (tokens[4].tag.name, tokens[4].tag.value) == ("jkl", " mno")

    def test_crlf_is_single_line_break(self):
        tokens = tokenize("a\r\nb")
        assert tokens == [Text("a"), LineBreak("\r\n"), Text("b")]

    def test_link_tag_variant(self):
        tokens = tokenize("{@link Foo bar}{@code Foo}")
        assert isinstance(tokens[0].tag, Link)
        assert tokens[0].tag.target == "Foo"
        assert tokens[0].tag.label == " bar"
        assert not isinstance(tokens[1].tag, Link)


class TestTokenizeLeniency:
    """Niepoprawna składnia degraduje do tekstu, nigdy nie zgłasza błędu"""

    def test_unterminated_tag_is_text(self):
        assert tokenize("abc {@link foo") == [Text("abc {@link foo")]

    def test_unterminated_tag_keeps_line_breaks(self):
        assert tokenize("{@link a\nb") == [Text("{@link a"), LineBreak(), Text("b")]

    def test_tag_without_name_is_text(self):
        assert tokenize("{@} x") == [Text("{@} x")]
        assert tokenize("{@ foo}") == [Text("{@ foo}")]

    def test_stray_braces_are_text(self):
        assert tokenize("a { b } c") == [Text("a { b } c")]

    def test_escaped_close_brace(self):
        tokens = tokenize("{@code a\\}b} c")
        assert isinstance(tokens[0], InlineTag)
        assert tokens[0].tag.value == " a\\}b"
        assert tokens[1] == Text(" c")

    def test_inline_tags_do_not_nest(self):
        tokens = tokenize("{@a x\n{@b y}")
        assert len(tokens) == 1
        assert tokens[0].tag.name == "a"
        assert tokens[0].tag.value == " x\n{@b y"

    def test_many_unterminated_tags(self):
        text = "{@x \n" * 20000
        tokens = tokenize(text)
        assert len(tokens) == 40000
        assert tokens[0] == Text("{@x ")
        assert tokens[1] == LineBreak()
        assert "".join(t.value for t in tokens) == text

    def test_many_nameless_tags_before_close(self):
        text = "{@ " * 20000 + "{@code x}"
        tokens = tokenize(text)
        assert tokens[0] == Text("{@ " * 20000)
        assert tokens[1].tag == Tag("code", " x")


@pytest.mark.parametrize("text", [
    "",
    "abc",
    "\n\n",
    "first\n\nbody\n@param x the x\n",
    "{@link #m(String, int) label}\r\ntext {@code {}",
    "a {@link\nFoo}\n  @tag value\n{@",
    "{@ }{@}{@x}}}",
])
def test_tokenize_is_lossless(text):
    assert "".join(t.value for t in tokenize(text)) == text

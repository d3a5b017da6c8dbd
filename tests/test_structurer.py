import pytest

from doc_model import Doc, InlineTag, Link, Tag
from doc_parser import parse


def assert_comment(text, first_sentence, body, *block_tags):
    doc = parse(text)
    assert doc.first_sentence.value == first_sentence
    assert (doc.body.value if doc.body is not None else None) == body
    assert list(doc.block_tags) == list(block_tags)


class TestCommentParser:
    """first sentence / body / tagi blokowe"""

    @pytest.mark.parametrize("text, first, body, tags", [
        ("first", "first", None, []),
        ("first\n\nbody", "first", "body", []),
        ("first @tag", "first @tag", None, []),
        ("first\n@tag1 value1", "first", None, [Tag("tag1", "value1")]),
        ("first\n@tag1 line1\nline2", "first", None, [Tag("tag1", "line1\nline2")]),
        (
            "first\n@tag1 value1\n@tag2 value2",
            "first",
            None,
            [Tag("tag1", "value1"), Tag("tag2", "value2")],
        ),
    ])
    def test_comment_parser(self, text, first, body, tags):
        assert_comment(text, first, body, *tags)

    def test_empty_comment(self):
        doc = parse("")
        assert doc.first_sentence.value == ""
        assert doc.body is None
        assert doc.block_tags == ()

    def test_create_is_parse(self):
        assert Doc.create("first\n\nbody") == parse("first\n\nbody")

    def test_multiline_first_sentence(self):
        assert_comment("line one\nline two\n\nbody", "line one\nline two", "body")

    def test_body_keeps_inner_blank_lines(self):
        assert_comment("first\n\npara1\n\npara2", "first", "para1\n\npara2")

    def test_body_trims_outer_blank_lines(self):
        assert_comment("first\n\n\n\nbody\n\n", "first", "body")

    def test_empty_continuation_is_no_body(self):
        assert_comment("first\n\n", "first", None)

    def test_leading_blank_line_gives_empty_first_sentence(self):
        assert_comment("\n\nbody", "", "body")

    def test_body_before_block_tags(self):
        assert_comment(
            "first\n\nbody\n@since 1.0",
            "first",
            "body",
            Tag("since", "1.0"),
        )

    def test_whitespace_only_line_is_blank(self):
        assert_comment("first\n  \nbody", "first", "body")


class TestBlockTags:
    """Granice i wartości tagów blokowych"""

    def test_indented_block_tag(self):
        assert_comment("first\n   @since 1.0", "first", None, Tag("since", "1.0"))

    def test_repeated_tag_names_keep_order(self):
        doc = parse("first\n@param a the a\n@return r\n@param b the b")
        assert [t.name for t in doc.block_tags] == ["param", "return", "param"]
        assert [t.value for t in doc.block_tags_named("param")] == ["a the a", "b the b"]

    def test_value_starting_on_next_line(self):
        assert_comment("first\n@return\n  the result", "first", None, Tag("return", "the result"))

    def test_trailing_blank_lines_dropped_from_value(self):
        assert_comment(
            "first\n@a v\n\n@b w\n\n",
            "first",
            None,
            Tag("a", "v"),
            Tag("b", "w"),
        )

    def test_continuation_keeps_indentation(self):
        assert_comment("first\n@a x\n  y", "first", None, Tag("a", "x\n  y"))

    def test_tag_without_value(self):
        assert_comment("first\n@deprecated", "first", None, Tag("deprecated", ""))

    def test_at_without_name_is_text(self):
        assert_comment("first\n@ not a tag", "first\n@ not a tag", None)

    @pytest.mark.parametrize("line", ["@(see below) x", "@! bang", "@#anchor x"])
    def test_at_followed_by_non_name_character_is_text(self, line):
        assert_comment(f"first\n{line}", f"first\n{line}", None)

    def test_tag_name_characters(self):
        assert_comment("first\n@x.y-z_1 v", "first", None, Tag("x.y-z_1", "v"))

    def test_line_starting_with_inline_tag_is_not_block_tag(self):
        assert_comment("first\n{@code @x} y", "first\n{@code @x} y", None)

    def test_inline_tag_spanning_lines_is_not_a_boundary(self):
        doc = parse("first {@link\n@foo}\n@tag v")
        assert doc.first_sentence.value == "first {@link\n@foo}"
        assert doc.block_tags == (Tag("tag", "v"),)

    def test_block_tag_value_keeps_inline_tags(self):
        assert_comment(
            "first\n@return the {@code x}",
            "first",
            None,
            Tag("return", "the {@code x}"),
        )

    def test_block_tag_value_is_tokenized(self):
        doc = parse("first\n@param x see {@link Foo} now")
        tag = doc.block_tags[0]
        assert [t.value for t in tag.tokens] == ["x see ", "{@link Foo}", " now"]
        assert [link.target for link in tag.inline_links()] == ["Foo"]
        assert [link.target for link in doc.links()] == ["Foo"]

    def test_see_reference_is_link(self):
        doc = parse("first\n@see #method(String,int) see this")
        tag = doc.block_tags[0]
        assert isinstance(tag, Link)
        assert tag.target == "#method(String,int)"
        assert tag.label == " see this"

    def test_see_text_is_plain_tag(self):
        doc = parse('first\n@see "The book"\n@see <a href="x">x</a>')
        assert not any(isinstance(t, Link) for t in doc.block_tags)


class TestDocTokens:
    """Tokeny i linki dostępne z Doc"""

    def test_tokens_cover_first_sentence_and_body(self):
        doc = parse("{@link A}\n\n{@link B} text")
        values = [t.value for t in doc.tokens]
        assert values == ["{@link A}", "{@link B}", " text"]

    def test_links_in_source_order(self):
        doc = parse("{@link A} {@code x}\n\n{@linkplain B}\n@see C")
        assert [link.target for link in doc.links()] == ["A", "B", "C"]
        assert all(isinstance(t, InlineTag) for t in doc.tokens if t.is_inline_tag())

"""Tests for wikinav.infrastructure.parsing.wiki_links."""

import pytest

from wikinav.domain.entities import ParsedLink
from wikinav.domain.enums import LinkErrorKind
from wikinav.domain.errors import EmptyLinkError, LinkParseError, MalformedLinkError, WikiNavError
from wikinav.infrastructure.parsing.wiki_links import (
    LinkParser,
    find_link_at,
    is_offset_in_link,
    iter_link_occurrences,
)


@pytest.fixture
def parser():
    return LinkParser()


class TestParseSimple:
    def test_simple_page(self, parser):
        link = parser.parse("Simple Page")
        assert link == ParsedLink(page_name="Simple Page")
        assert link.is_alias is False
        assert link.heading is None
        assert link.display_name is None

    def test_trims(self, parser):
        assert parser.parse("  Padded Page \t").page_name == "Padded Page"

    @pytest.mark.parametrize("text", ["A", "BR-DOCUMENT-001", "日本語のページ", "a:b/c"])
    def test_whole_text_is_page_name(self, parser, text):
        assert parser.parse(text) == ParsedLink(page_name=text)


class TestParseAlias:
    def test_alias(self, parser):
        link = parser.parse("Target Page|Display Name")
        assert link.page_name == "Target Page"
        assert link.display_name == "Display Name"
        assert link.heading is None
        assert link.is_alias is True

    def test_alias_with_heading(self, parser):
        link = parser.parse("Target#Section|Display")
        assert link == ParsedLink(page_name="Target", heading="Section", display_name="Display")
        assert link.is_alias is True

    def test_parts_are_trimmed(self, parser):
        link = parser.parse(" Target # Section | Display ")
        assert link == ParsedLink(page_name="Target", heading="Section", display_name="Display")

    def test_splits_on_first_pipe(self, parser):
        link = parser.parse("Target|Display|More")
        assert link.page_name == "Target"
        assert link.display_name == "Display|More"

    def test_hash_after_pipe_stays_in_display(self, parser):
        link = parser.parse("Target|Issue #42")
        assert link.page_name == "Target"
        assert link.heading is None
        assert link.display_name == "Issue #42"

    def test_splits_heading_on_first_hash(self, parser):
        link = parser.parse("A#B#C|D")
        assert link == ParsedLink(page_name="A", heading="B#C", display_name="D")

    def test_empty_display_is_still_alias(self, parser):
        link = parser.parse("Target|")
        assert link.page_name == "Target"
        assert link.display_name == ""
        assert link.is_alias is True


class TestParseHeading:
    def test_heading(self, parser):
        link = parser.parse("Page#Heading")
        assert link == ParsedLink(page_name="Page", heading="Heading")
        assert link.is_alias is False

    def test_parts_are_trimmed(self, parser):
        assert parser.parse("  Page  #  Heading  ") == ParsedLink(page_name="Page", heading="Heading")

    def test_splits_on_first_hash(self, parser):
        assert parser.parse("A#B#C") == ParsedLink(page_name="A", heading="B#C")

    def test_empty_heading(self, parser):
        assert parser.parse("Page#") == ParsedLink(page_name="Page", heading="")


class TestParseProperties:
    @pytest.mark.parametrize("a,b", [
        ("Target", "Display"),
        ("Target#Sec", "Display"),
        (" spaced ", " out "),
        ("X", "with | pipes # and hashes"),
    ])
    def test_alias_form(self, parser, a, b):
        link = parser.parse(f"{a}|{b}")
        assert link.is_alias is True
        assert link.display_name == b.strip()
        if "#" in a:
            page, heading = a.split("#", 1)
            assert link.page_name == page.strip()
            assert link.heading == heading.strip()
        else:
            assert link.page_name == a.strip()

    @pytest.mark.parametrize("a,b", [
        ("Page", "Heading"),
        (" Page ", " Heading "),
        ("Page", "Heading # nested"),
    ])
    def test_heading_form(self, parser, a, b):
        link = parser.parse(f"{a}#{b}")
        assert link.page_name == a.strip()
        assert link.heading == b.strip()
        assert link.is_alias is False
        assert link.display_name is None


class TestParseErrors:
    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty(self, parser, text):
        with pytest.raises(EmptyLinkError) as exc_info:
            parser.parse(text)
        assert exc_info.value.kind is LinkErrorKind.EMPTY_LINK
        assert exc_info.value.link_text == text

    @pytest.mark.parametrize("text", ["|Display", "#Heading", " #H|D", "  | x"])
    def test_malformed(self, parser, text):
        with pytest.raises(MalformedLinkError) as exc_info:
            parser.parse(text)
        assert exc_info.value.kind is LinkErrorKind.MALFORMED
        assert exc_info.value.link_text == text

    def test_error_hierarchy(self):
        assert issubclass(EmptyLinkError, LinkParseError)
        assert issubclass(MalformedLinkError, LinkParseError)
        assert issubclass(LinkParseError, WikiNavError)

    def test_details_carry_text(self, parser):
        with pytest.raises(LinkParseError) as exc_info:
            parser.parse("|x")
        assert exc_info.value.details == {"kind": "malformed", "link_text": "|x"}


class TestIterLinkOccurrences:
    def test_offsets_and_positions(self):
        content = "See [[A]] and\n  [[B|b]]"
        first, second = list(iter_link_occurrences(content))

        assert first.raw == "A"
        assert (first.start, first.end) == (4, 9)
        assert (first.line, first.column) == (0, 4)
        assert content[first.start:first.end] == "[[A]]"

        assert second.raw == "B|b"
        assert (second.line, second.column) == (1, 2)
        assert content[second.start:second.end] == "[[B|b]]"

    def test_blank_interior_is_yielded(self):
        occurrences = list(iter_link_occurrences("Empty [[ ]] here"))
        assert [o.raw for o in occurrences] == [" "]

    def test_unclosed_is_ignored(self):
        assert list(iter_link_occurrences("An [[unclosed link")) == []

    def test_no_links(self):
        assert list(iter_link_occurrences("Just [markdown](http://x.com).")) == []

    def test_many_lines(self):
        content = "Line one [[A]].\nLine two [[B]].\nLine three [[C]]."
        assert [o.line for o in iter_link_occurrences(content)] == [0, 1, 2]


class TestCursorInLink:
    CONTENT = "go [[Page]] now"

    @pytest.mark.parametrize("offset,expected", [
        (0, False),
        (3, False),
        (5, True),
        (7, True),
        (9, True),
        (12, False),
    ])
    def test_is_offset_in_link(self, offset, expected):
        assert is_offset_in_link(self.CONTENT, offset) is expected

    def test_unterminated_link(self):
        assert is_offset_in_link("[[open only", 5) is False

    def test_find_link_at(self):
        occurrence = find_link_at(self.CONTENT, 6)
        assert occurrence is not None
        assert occurrence.raw == "Page"

    @pytest.mark.parametrize("offset", [1, 3, 11, 14])
    def test_find_link_outside(self, offset):
        assert find_link_at(self.CONTENT, offset) is None

    def test_find_second_link(self):
        content = "[[A]] then [[B]]"
        assert find_link_at(content, 13).raw == "B"


class TestCursorHelpersAgree:
    @pytest.mark.parametrize("content", [
        "go [[Page]] now",
        "[[A]] then [[B|b]]\n[[C#h]]",
        "no links at all",
        "[[open only",
    ])
    def test_same_answer_at_every_offset(self, content):
        for offset in range(len(content) + 1):
            found = find_link_at(content, offset) is not None
            assert found is is_offset_in_link(content, offset), offset

    @pytest.mark.parametrize("offset", [4, 10])
    def test_between_bracket_characters_is_outside(self, offset):
        content = "go [[Page]] now"
        assert find_link_at(content, offset) is None
        assert is_offset_in_link(content, offset) is False

    def test_between_closing_brackets_with_later_link(self):
        content = "[[A]] [[B]]"
        assert is_offset_in_link(content, 4) is False
        assert find_link_at(content, 4) is None

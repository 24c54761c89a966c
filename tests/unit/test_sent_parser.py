"""Test the sent document parser."""

import pytest
from sentdeck.errors import InvalidBooleanValue, InvalidColourValue, PresentationLoadError
from sentdeck.models import EmptySlide, ImageSlide, Presentation, TextSlide
from sentdeck.sent_parser import (
    SentParser,
    describe_error,
    load_presentation,
    load_presentation_or_error,
    parse_presentation,
)


MULTI_SLIDE_DOCUMENT = """This is a text slide.

Text slide with multiple lines:
- item 1
- item 2

\\

@image.png
caption text ignored

Final slide
"""


def test_multi_slide_document():
    """Text, multi-line text, empty, image and text slides, in source order."""
    presentation = parse_presentation(MULTI_SLIDE_DOCUMENT)

    assert presentation.slides == (
        TextSlide("This is a text slide."),
        TextSlide("Text slide with multiple lines:\n- item 1\n- item 2"),
        EmptySlide(),
        ImageSlide("image.png"),
        TextSlide("Final slide"),
    )


def test_parsing_is_idempotent():
    assert parse_presentation(MULTI_SLIDE_DOCUMENT) == parse_presentation(MULTI_SLIDE_DOCUMENT)


def test_parser_instance_can_be_reused():
    parser = SentParser()
    first = parser.parse("#.font:A\n\nOne")
    second = parser.parse("Two")
    assert first.font_list == ("A",)
    assert second.font_list == ()
    assert second.slides == (TextSlide("Two"),)


class TestNonEmptyInvariant:
    """A presentation always has at least one slide."""

    @pytest.mark.parametrize("source", ["", "\n\n\n", "   \n\t\n", "# only a comment", "#.fg:#ffffff"])
    def test_documents_without_slides_get_one_empty_slide(self, source):
        presentation = parse_presentation(source)
        assert presentation.slides == (EmptySlide(),)

    def test_presentation_rejects_empty_slide_tuple(self):
        with pytest.raises(ValueError):
            Presentation(slides=())


class TestComments:

    def test_comment_at_paragraph_start_is_dropped(self):
        presentation = parse_presentation("# a comment\nVisible text")
        assert presentation.slides == (TextSlide("Visible text"),)

    def test_comment_inside_paragraph_is_dropped(self):
        presentation = parse_presentation("Line one\n# a comment\nLine two")
        assert presentation.slides == (TextSlide("Line one\nLine two"),)

    def test_hash_mid_line_is_literal(self):
        presentation = parse_presentation("Issue # 42 is fixed")
        assert presentation.slides == (TextSlide("Issue # 42 is fixed"),)

    def test_comment_does_not_end_paragraph(self):
        presentation = parse_presentation("One\n#\nTwo")
        assert len(presentation.slides) == 1


class TestImages:

    def test_image_path_is_rest_of_line(self):
        presentation = parse_presentation("@images/diagram one.png")
        assert presentation.slides == (ImageSlide("images/diagram one.png"),)

    def test_lines_after_image_are_skipped_until_blank_line(self):
        presentation = parse_presentation("@a.png\nnote 1\n@b.png\n\nAfter")
        assert presentation.slides == (ImageSlide("a.png"), TextSlide("After"))

    def test_at_sign_mid_paragraph_is_text(self):
        presentation = parse_presentation("Contact\n@someone")
        assert presentation.slides == (TextSlide("Contact\n@someone"),)

    def test_consecutive_image_paragraphs(self):
        presentation = parse_presentation("@a.png\n\n@b.png")
        assert presentation.slides == (ImageSlide("a.png"), ImageSlide("b.png"))


class TestEscapes:

    def test_escaped_comment_is_text(self):
        presentation = parse_presentation("\\# not a comment")
        assert presentation.slides == (TextSlide("# not a comment"),)

    def test_escaped_image_marker_is_text(self):
        presentation = parse_presentation("\\@handle")
        assert presentation.slides == (TextSlide("@handle"),)

    def test_escaped_backslash(self):
        presentation = parse_presentation("\\\\server\\share")
        assert presentation.slides == (TextSlide("\\server\\share"),)

    def test_lone_escape_is_empty_slide(self):
        presentation = parse_presentation("\\")
        assert presentation.slides == (EmptySlide(),)

    def test_lines_after_empty_slide_are_skipped(self):
        presentation = parse_presentation("\\\nignored\n\nShown")
        assert presentation.slides == (EmptySlide(), TextSlide("Shown"))

    def test_lone_escape_mid_paragraph_is_dropped(self):
        presentation = parse_presentation("One\n\\\nTwo")
        assert presentation.slides == (TextSlide("One\nTwo"),)

    def test_escaped_option_marker_is_text(self):
        presentation = parse_presentation("\\#.fg:zzz")
        assert presentation.slides == (TextSlide("#.fg:zzz"),)
        assert presentation.foreground_colour is None


class TestWhitespace:

    def test_trailing_whitespace_is_trimmed(self):
        presentation = parse_presentation("Hello   \nWorld\t")
        assert presentation.slides == (TextSlide("Hello\nWorld"),)

    def test_leading_whitespace_is_kept(self):
        presentation = parse_presentation("List:\n  - nested")
        assert presentation.slides == (TextSlide("List:\n  - nested"),)

    def test_whitespace_only_line_separates_paragraphs(self):
        presentation = parse_presentation("One\n   \nTwo")
        assert presentation.slides == (TextSlide("One"), TextSlide("Two"))

    def test_crlf_line_endings(self):
        presentation = parse_presentation("One\r\nstill one\r\n\r\nTwo\r\n")
        assert presentation.slides == (TextSlide("One\nstill one"), TextSlide("Two"))


class TestOptions:

    def test_configuration_options(self):
        presentation = parse_presentation(
            "#.font:Roboto\n#.font:Helvetica\n#.fg:#ffffff\n#.bg:#000000\n\nHello"
        )
        assert presentation.font_list == ("Roboto", "Helvetica")
        assert presentation.foreground_colour == (1.0, 1.0, 1.0, 1.0)
        assert presentation.background_colour == (0.0, 0.0, 0.0, 1.0)
        assert presentation.show_cursor is None
        assert presentation.slides == (TextSlide("Hello"),)

    def test_defaults_are_absent(self):
        presentation = parse_presentation("Hello")
        assert presentation.font_list == ()
        assert presentation.foreground_colour is None
        assert presentation.background_colour is None
        assert presentation.show_cursor is None

    def test_cursor_option(self):
        assert parse_presentation("#.cursor:true").show_cursor is True
        assert parse_presentation("#.cursor:false").show_cursor is False

    def test_first_single_valued_option_wins(self):
        presentation = parse_presentation(
            "#.fg:#ffffff\n#.fg:#000000\n#.bg:#000000\n#.bg:#ffffff\n#.cursor:false\n#.cursor:true"
        )
        assert presentation.foreground_colour == (1.0, 1.0, 1.0, 1.0)
        assert presentation.background_colour == (0.0, 0.0, 0.0, 1.0)
        assert presentation.show_cursor is False

    def test_later_invalid_duplicate_is_ignored(self):
        presentation = parse_presentation("#.fg:#ffffff\n#.fg:bogus\n#.cursor:true\n#.cursor:maybe")
        assert presentation.foreground_colour == (1.0, 1.0, 1.0, 1.0)
        assert presentation.show_cursor is True

    def test_font_value_is_everything_after_first_separator(self):
        presentation = parse_presentation("#.font:Iosevka:style=Bold")
        assert presentation.font_list == ("Iosevka:style=Bold",)

    def test_unknown_option_is_ignored(self):
        presentation = parse_presentation("#.transition:fade\nHello")
        assert presentation.slides == (TextSlide("Hello"),)

    def test_option_without_separator_is_ignored(self):
        presentation = parse_presentation("#.fg\nHello")
        assert presentation.foreground_colour is None
        assert presentation.slides == (TextSlide("Hello"),)

    def test_option_inside_paragraph_does_not_split_it(self):
        presentation = parse_presentation("One\n#.font:Mono\nTwo")
        assert presentation.slides == (TextSlide("One\nTwo"),)
        assert presentation.font_list == ("Mono",)

    def test_option_after_image_still_applies(self):
        presentation = parse_presentation("@a.png\n#.bg:#000000")
        assert presentation.background_colour == (0.0, 0.0, 0.0, 1.0)

    def test_invalid_colour_aborts_parse(self):
        with pytest.raises(InvalidColourValue) as excinfo:
            parse_presentation("Hello\n\n#.bg:#12345\n\nWorld")
        assert excinfo.value.value == "#12345"

    def test_invalid_cursor_aborts_parse(self):
        with pytest.raises(InvalidBooleanValue) as excinfo:
            parse_presentation("#.cursor:yes")
        assert excinfo.value.value == "yes"


class TestLoading:

    def test_load_presentation_from_file(self, tmp_path):
        path = tmp_path / "talk.sent"
        path.write_text(MULTI_SLIDE_DOCUMENT, encoding="utf-8")
        assert load_presentation(path) == parse_presentation(MULTI_SLIDE_DOCUMENT)

    def test_missing_file_error_names_the_path(self, tmp_path):
        path = tmp_path / "missing.sent"
        with pytest.raises(PresentationLoadError) as excinfo:
            load_presentation(path)
        assert str(path) in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_load_or_error_shows_read_failure(self, tmp_path):
        path = tmp_path / "missing.sent"
        presentation = load_presentation_or_error(path)

        assert len(presentation.slides) == 1
        slide = presentation.slides[0]
        assert isinstance(slide, TextSlide)
        assert slide.content.startswith("unable to load the presentation: unable to read the file")
        assert str(path) in slide.content

    def test_load_or_error_shows_format_failure(self, tmp_path):
        path = tmp_path / "bad.sent"
        path.write_text("#.fg:purple\n\nHello", encoding="utf-8")

        presentation = load_presentation_or_error(path)

        assert presentation.slides == (
            TextSlide('unable to load the presentation: invalid colour value: "purple"'),
        )

    def test_describe_error_follows_causes(self):
        try:
            try:
                raise OSError("disk on fire")
            except OSError as e:
                raise PresentationLoadError("talk.sent") from e
        except PresentationLoadError as e:
            assert describe_error(e) == 'unable to read the file "talk.sent": disk on fire'


class TestLineBreaks:
    """Only newlines end a line; other separators are ordinary characters."""

    @pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029", "\r"])
    def test_separator_inside_line_is_content(self, separator):
        presentation = parse_presentation(f"a{separator}b")
        assert presentation.slides == (TextSlide(f"a{separator}b"),)

    def test_double_form_feed_does_not_split_slides(self):
        presentation = parse_presentation("one\x0c\x0ctwo")
        assert presentation.slides == (TextSlide("one\x0c\x0ctwo"),)

    def test_information_separators_are_not_trimmed(self):
        presentation = parse_presentation("text\x1f\nmore\x1c")
        assert presentation.slides == (TextSlide("text\x1f\nmore\x1c"),)

    def test_unicode_whitespace_is_trimmed(self):
        presentation = parse_presentation("text\u3000\u00a0\nmore\u2028")
        assert presentation.slides == (TextSlide("text\nmore"),)

    def test_line_of_form_feeds_is_blank(self):
        presentation = parse_presentation("one\n\x0c\x0c\ntwo")
        assert presentation.slides == (TextSlide("one"), TextSlide("two"))

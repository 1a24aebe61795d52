"""
Tests for text replacement matchers.
"""

from sitescribe_core.actions import WILDCARD, ChangeText
from sitescribe_core.matchers.base import CommandContext
from sitescribe_core.matchers.text import match_generic_text, match_heading_text, match_paragraph_text

FILE = "index.html"


def ctx(text, target=FILE):
    return CommandContext(text, target_file=target)


class TestHeading:
    def test_main_heading(self):
        assert match_heading_text(ctx("change heading to New Title")) == [
            ChangeText(file=FILE, selector="h1", new_text="New Title", old_text=WILDCARD)
        ]

    def test_user_casing_survives(self):
        assert match_heading_text(ctx("Change the main heading to Welcome To ACME"))[0].new_text == "Welcome To ACME"

    def test_named_level(self):
        assert match_heading_text(ctx("change h2 to Subtitle"))[0].selector == "h2"
        assert match_heading_text(ctx("change the heading h3 to Small"))[0].selector == "h3"

    def test_text_stops_at_and_clause(self):
        assert match_heading_text(ctx("change heading to Hello and make it bold"))[0].new_text == "Hello"

    def test_requires_new_text(self):
        assert match_heading_text(ctx("change heading")) == []

    def test_no_markup_file(self):
        assert match_heading_text(ctx("change heading to X", target=None)) == []


class TestParagraph:
    def test_paragraph(self):
        assert match_paragraph_text(ctx("change the first paragraph to Hello world with style")) == [
            ChangeText(file=FILE, selector="p", new_text="Hello world")
        ]

    def test_unrelated(self):
        assert match_paragraph_text(ctx("change heading to X")) == []


class TestGenericText:
    def test_from_to_gives_explicit_old_text(self):
        assert match_generic_text(ctx('change text from "Hello" to "Goodbye"')) == [
            ChangeText(file=FILE, selector="body", new_text="Goodbye", old_text="Hello")
        ]

    def test_selector_from_context(self):
        result = match_generic_text(ctx("update the button text to Buy now"))
        assert result == [ChangeText(file=FILE, selector="button", new_text="Buy now", old_text=WILDCARD)]

        assert match_generic_text(ctx("set link text to Read more"))[0].selector == "a"
        assert match_generic_text(ctx("change title text to Home"))[0].selector == "title"

    def test_needs_edit_verb_and_text(self):
        assert match_generic_text(ctx("show text")) == []
        assert match_generic_text(ctx("change heading to X")) == []

    def test_needs_target_text(self):
        assert match_generic_text(ctx("change text")) == []

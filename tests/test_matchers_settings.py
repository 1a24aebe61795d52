"""
Tests for app-setting matchers and the matcher cascade.
"""

import pytest

from sitescribe_core.actions import (
    AddBlock,
    ChangeFontSize,
    ChangeLanguage,
    ChangeStyle,
    ChangeText,
    ChangeTheme,
    ExportSettings,
    ImportSettings,
    ResetSettings,
    SetAutoSave,
    SetFullscreen,
    SetNotifications,
    ShowAbout,
    ShowFileHistory,
    ShowHelp,
    ShowShortcuts,
)
from sitescribe_core.matchers import DOCUMENT_MATCHERS, SETTING_MATCHERS, CommandContext, run_cascade

FILE = "index.html"


def cascade(text, target=FILE):
    return run_cascade(CommandContext(text, target_file=target))


@pytest.mark.parametrize("command,expected", [
    ("change theme to dark", [ChangeTheme(theme="dark")]),
    ("enable dark mode", [ChangeTheme(theme="dark")]),
    ("set font size to large", [ChangeFontSize(size="large")]),
    ("make the font bigger", [ChangeFontSize(size="large")]),
    ("change language to polish", [ChangeLanguage(language="polish")]),
    ("turn off autosave", [SetAutoSave(enabled=False)]),
    ("enable auto-save", [SetAutoSave(enabled=True)]),
    ("show keyboard shortcuts", [ShowShortcuts()]),
    ("show file history", [ShowFileHistory()]),
    ("export settings", [ExportSettings()]),
    ("import my preferences", [ImportSettings()]),
    ("disable notifications", [SetNotifications(enabled=False)]),
    ("go fullscreen", [SetFullscreen(enabled=True)]),
    ("exit full screen", [SetFullscreen(enabled=False)]),
    ("help", [ShowHelp()]),
    ("about", [ShowAbout()]),
    ("reset settings to default", [ResetSettings()]),
])
def test_setting_commands(command, expected):
    assert cascade(command) == expected


def test_settings_need_no_markup_file():
    assert cascade("change theme to dark", target=None) == [ChangeTheme(theme="dark")]


def test_settings_only_get_a_second_chance():
    result = cascade("add a help button")
    assert len(result) == 1
    assert isinstance(result[0], AddBlock)


def test_document_matchers_skip_without_markup_file():
    assert cascade("add a help button", target=None) == [ShowHelp()]


def test_background_does_not_also_set_text_color():
    assert cascade("set background color to blue") == [
        ChangeStyle(file=FILE, selector="body", property="background-color", value="blue")
    ]


def test_heading_command_yields_single_action():
    assert cascade("change heading to New Title") == [ChangeText(file=FILE, selector="h1", new_text="New Title")]


def test_unrecognized_command():
    assert cascade("xyzzy plugh") == []


def test_outputs_are_concatenated_in_matcher_order():
    result = cascade("change first name background to yellow")
    assert [a.kind for a in result] == ["changeStyle", "modifyStyle"]


def test_color_input_command_yields_only_the_insert():
    [action] = cascade("add a color input and set its value to #ff0000")

    assert isinstance(action, AddBlock)
    assert action.html_block == '<input type="color" name="color" value="#ff0000">'


def test_matcher_lists():
    assert len(DOCUMENT_MATCHERS) == 10
    assert len(SETTING_MATCHERS) == 13

"""Tests for the Textual front end."""

import asyncio

import pytest
from unittest.mock import Mock
from textual.widgets import Button, TextArea

from markpad.constants import EditorConstants
from markpad.editor import Editor
from markpad.persistence import DocumentStore, LocalStorage
from markpad.preview import PreviewState
from markpad.render import MarkdownRenderer
from markpad.textual_app import (
    MarkpadApp,
    TOOLBAR_BUTTONS,
    location_to_offset,
    offset_to_location,
)


def test_app_creation():
    """Test that the app can be created around an editor session."""
    store = Mock(spec=DocumentStore)
    editor = Editor(store=store)
    app = MarkpadApp(editor=editor)
    assert app.editor is editor
    # Nothing is loaded before mount
    store.load.assert_not_called()


def test_toolbar_actions_are_registered():
    editor = Editor(store=Mock(spec=DocumentStore))
    for _, action in TOOLBAR_BUTTONS:
        assert editor.command_registry.get_command(action) is not None


def test_accelerators_are_priority_bindings():
    keys = {binding.key: binding for binding in MarkpadApp.BINDINGS}
    assert keys["ctrl+b"].priority
    assert keys["ctrl+i"].priority


@pytest.mark.parametrize("text,offset,location", [
    ("", 0, (0, 0)),
    ("abc", 2, (0, 2)),
    ("ab\ncd", 3, (1, 0)),
    ("ab\ncd", 5, (1, 2)),
    ("ab\n\ncd", 4, (2, 0)),
])
def test_offset_location_conversion(text, offset, location):
    assert offset_to_location(text, offset) == location
    assert location_to_offset(text, location) == offset


def test_location_clamps_to_document():
    text = "ab\ncd"
    assert location_to_offset(text, (0, 10)) == 2
    assert location_to_offset(text, (7, 1)) == 4
    assert offset_to_location(text, 99) == (1, 2)


def make_editor(tmp_path, text="hello"):
    """Editor with a saved document and a renderer that counts its calls."""
    storage = LocalStorage(tmp_path)
    storage.set_item(EditorConstants.STORAGE_KEY, text)
    renderer = MarkdownRenderer()
    renderer.render = Mock(wraps=renderer.render)
    return Editor(store=DocumentStore(storage), renderer=renderer)


def toolbar_button(app, action):
    return next(button for button in app.query(Button) if button.name == action)


def test_bold_button_formats_at_cursor(tmp_path):
    async def scenario():
        app = MarkpadApp(editor=make_editor(tmp_path))
        async with app.run_test() as pilot:
            await pilot.pause()
            toolbar_button(app, "bold").press()
            await pilot.pause()

            area = app.query_one("#editor", TextArea)
            assert app.editor.text == "****hello"
            assert area.text == "****hello"
            assert area.selection.end == (0, 4)
            assert app.editor.store.load() == "****hello"

    asyncio.run(scenario())


def test_ctrl_b_binding(tmp_path):
    async def scenario():
        app = MarkpadApp(editor=make_editor(tmp_path))
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+b")
            await pilot.pause()

            assert app.editor.text == "****hello"
            assert app.query_one("#editor", TextArea).text == "****hello"

    asyncio.run(scenario())


def test_toggle_button_shows_and_hides_preview(tmp_path):
    async def scenario():
        editor = make_editor(tmp_path)
        app = MarkpadApp(editor=editor)
        async with app.run_test() as pilot:
            await pilot.pause()
            card = app.query_one("#preview-card")
            toggle = app.query_one("#toggle", Button)
            assert not card.display

            toggle.press()
            await pilot.pause()

            assert editor.preview_state is PreviewState.EXPANDED
            assert card.display
            assert toggle.has_class("pressed")
            assert app.query_one("#grid").has_class(EditorConstants.SPLIT_LAYOUT_CLASS)
            assert app.query_one("#preview", TextArea).text == "<p>hello</p>"
            # The toggle is not a formatting button
            assert editor.text == "hello"

            toggle.press()
            await pilot.pause()

            assert editor.preview_state is PreviewState.COLLAPSED
            assert not card.display
            assert not toggle.has_class("pressed")

    asyncio.run(scenario())


def test_typing_while_expanded_updates_preview(tmp_path):
    async def scenario():
        editor = make_editor(tmp_path)
        app = MarkpadApp(editor=editor)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#toggle", Button).press()
            await pilot.pause()

            await pilot.press("z")
            await pilot.pause()

            assert editor.text == "zhello"
            assert app.query_one("#preview", TextArea).text == "<p>zhello</p>"
            assert editor.preview.renderer.render.call_count == 2

    asyncio.run(scenario())


def test_toolbar_edit_is_not_echoed_back(tmp_path):
    """Reloading the text area after a toolbar edit does not rerun the cascade."""
    async def scenario():
        editor = make_editor(tmp_path)
        app = MarkpadApp(editor=editor)
        async with app.run_test() as pilot:
            await pilot.pause()
            app.query_one("#toggle", Button).press()
            await pilot.pause()

            toolbar_button(app, "h1").press()
            await pilot.pause()

            assert editor.text == "# hello"
            assert app.query_one("#preview", TextArea).text == '<h1 id="hello">hello</h1>'
            # One render for the toggle, one for the heading
            assert editor.preview.renderer.render.call_count == 2

    asyncio.run(scenario())

"""
Tests for MainWindow trigger wiring.
"""
from PySide6.QtCore import QEvent, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QMessageBox

from qnotepad.commands.edit_commands import NO_SELECTION_MESSAGE
from qnotepad.core import FontStyle


def click(qtbot, window, command_id):
    qtbot.mouseClick(window.button_setup.button(command_id), Qt.LeftButton)


class TestMainWindow:

    def test_window_initialization(self, window):
        assert window.windowTitle() == "Simple Notepad Clone"
        assert window.text_edit.toPlainText() == ""
        assert window.invoker.depth == 0
        assert not window.button_setup.button("undo").isEnabled()

    def test_buttons_exist(self, window):
        for command_id in ("cut", "copy", "paste", "italic", "undo"):
            assert window.button_setup.button(command_id) is not None

    def test_edit_menu_actions(self, window):
        texts = [action.text().replace("&", "") for action in window.menu_setup.edit_actions()]
        assert texts == ["Undo", "Cut", "Copy", "Paste", "Italic"]

    def test_text_area_history_is_disabled(self, window):
        assert not window.text_edit.isUndoRedoEnabled()


class TestEditTriggers:

    def test_cut_then_undo(self, qtbot, window, clipboard):
        window.text_edit.setPlainText("Hello World")
        window.buffer.select(6, 11)

        click(qtbot, window, "cut")
        assert window.text_edit.toPlainText() == "Hello "
        assert clipboard.read() == "World"
        assert window.invoker.depth == 1
        assert window.button_setup.button("undo").isEnabled()

        click(qtbot, window, "undo")
        assert window.text_edit.toPlainText() == "Hello World"
        assert window.buffer.selection_range() == (6, 11)
        assert window.status_setup.current_message() == "Undone: Cut"

    def test_undo_action_names_last_command(self, qtbot, window):
        window.text_edit.setPlainText("Hello World")
        window.buffer.select(0, 5)
        click(qtbot, window, "cut")
        assert "Undo Cut" in window.menu_setup.action("undo").text()
        assert window.menu_setup.action("undo").isEnabled()

    def test_cut_and_undo_around_emoji(self, qtbot, window, clipboard):
        window.text_edit.setPlainText("a\U0001F600b\nc")
        window.buffer.select(1, 4)
        assert window.buffer.selected_text() == "\U0001F600b\n"

        click(qtbot, window, "cut")
        assert window.text_edit.toPlainText() == "ac"
        assert clipboard.read() == "\U0001F600b\n"

        click(qtbot, window, "undo")
        assert window.text_edit.toPlainText() == "a\U0001F600b\nc"
        assert window.buffer.selection_range() == (1, 4)

    def test_copy_then_paste(self, qtbot, window, clipboard):
        window.text_edit.setPlainText("abc")
        window.buffer.select(0, 1)
        click(qtbot, window, "copy")
        assert clipboard.read() == "a"
        assert window.text_edit.toPlainText() == "abc"

        window.buffer.select(3, 3)
        click(qtbot, window, "paste")
        assert window.text_edit.toPlainText() == "abca"
        assert window.status_setup.undo_text == "Undo: 2"

    def test_paste_into_empty_buffer_and_undo(self, qtbot, window, clipboard):
        clipboard.write("Hi")
        click(qtbot, window, "paste")
        assert window.text_edit.toPlainText() == "Hi"
        assert window.status_setup.caret_text == "Ln 1, Col 3"
        click(qtbot, window, "undo")
        assert window.text_edit.toPlainText() == ""

    def test_undo_with_empty_history(self, qtbot, window):
        window.undo()
        assert window.status_setup.current_message() == "Nothing to undo"
        assert window.invoker.depth == 0

    def test_italic_toggle_and_undo(self, qtbot, window):
        window.text_edit.setPlainText("abc")
        window.buffer.select(0, 2)
        click(qtbot, window, "italic")
        assert window.text_edit.font().italic()
        assert window.status_setup.style_text == "Italic"

        click(qtbot, window, "undo")
        assert not window.text_edit.font().italic()
        assert window.status_setup.style_text == "Plain"

    def test_italic_without_selection_warns(self, qtbot, window, monkeypatch):
        shown = []
        monkeypatch.setattr(
            QMessageBox,
            "information",
            lambda parent, title, text, *args, **kwargs: shown.append(text),
        )
        window.text_edit.setPlainText("abc")

        click(qtbot, window, "italic")
        assert shown == [NO_SELECTION_MESSAGE]
        assert window.buffer.font_style() == FontStyle.PLAIN
        assert window.invoker.depth == 1


class TestKeyboardRouting:

    def test_cut_shortcut_goes_through_history(self, qtbot, window, clipboard):
        window.text_edit.setPlainText("Hello World")
        window.buffer.select(0, 6)
        qtbot.keyClick(window.text_edit, Qt.Key_X, Qt.ControlModifier)
        assert window.text_edit.toPlainText() == "World"
        assert clipboard.read() == "Hello "
        assert window.invoker.depth == 1

    def test_undo_shortcut_uses_history(self, qtbot, window, clipboard):
        clipboard.write("xyz")
        qtbot.keyClick(window.text_edit, Qt.Key_V, Qt.ControlModifier)
        assert window.text_edit.toPlainText() == "xyz"
        qtbot.keyClick(window.text_edit, Qt.Key_Z, Qt.ControlModifier)
        assert window.text_edit.toPlainText() == ""
        assert window.invoker.depth == 0

    def test_typing_is_not_intercepted(self, qtbot, window):
        qtbot.keyClicks(window.text_edit, "abc")
        assert window.text_edit.toPlainText() == "abc"
        assert window.invoker.depth == 0

    def test_middle_click_paste_is_swallowed(self, window):
        viewport = window.text_edit.viewport()
        for event_type in (QEvent.MouseButtonPress, QEvent.MouseButtonRelease):
            event = QMouseEvent(
                event_type, QPointF(5, 5), QPointF(5, 5), Qt.MiddleButton, Qt.MiddleButton, Qt.NoModifier
            )
            assert window.command_manager.eventFilter(viewport, event) is True

    def test_left_click_passes_through(self, window):
        event = QMouseEvent(
            QEvent.MouseButtonPress, QPointF(5, 5), QPointF(5, 5), Qt.LeftButton, Qt.LeftButton, Qt.NoModifier
        )
        assert window.command_manager.eventFilter(window.text_edit.viewport(), event) is False


class TestCommandManager:

    def test_unknown_command(self, window):
        assert window.command_manager.dispatch_command("bold") is False

    def test_handler_failure_is_reported(self, window):
        def explode():
            raise RuntimeError("boom")

        window.command_manager.register_command("explode", explode, "Explode")
        assert window.command_manager.dispatch_command("explode") is True
        assert window.status_setup.current_message() == "Explode failed"

    def test_default_bindings_from_config(self, window):
        manager = window.command_manager
        assert manager.binding_for("Ctrl+X") == "cut"
        assert manager.binding_for("Ctrl+C") == "copy"
        assert manager.binding_for("Ctrl+V") == "paste"
        assert manager.binding_for("Ctrl+I") == "italic"
        assert manager.binding_for("Ctrl+Z") == "undo"

    def test_custom_binding(self, qtbot, window, clipboard):
        window.command_manager.bind_key("Ctrl+Shift+P", "paste")
        clipboard.write("!")
        qtbot.keyClick(window.text_edit, Qt.Key_P, Qt.ControlModifier | Qt.ShiftModifier)
        assert window.text_edit.toPlainText() == "!"


class TestSettings:

    def test_close_saves_geometry(self, qtbot, window, config_manager):
        window.close()
        assert config_manager.get("ui", "window.geometry")
        assert (config_manager.config_dir / "ui.json").exists()

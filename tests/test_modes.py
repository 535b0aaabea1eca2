from __future__ import annotations

from typing import List

from rowedit.buffer import Buffer
from rowedit.config import EditorConfig
from rowedit.modes import KeyInput, ModeBus, ModeContext, ModeResult
from rowedit.modes.mode_manager import ModeManager, create_default_manager
from rowedit.view import Viewport


def make_manager(
    *lines: str,
    rows: int = 10,
    cols: int = 40,
    config: EditorConfig | None = None,
) -> ModeManager:
    return create_default_manager(
        Buffer.from_lines(list(lines)), rows=rows, cols=cols, config=config
    )


def press(manager: ModeManager, key: str, *modifiers: str) -> ModeResult:
    return manager.handle_key(KeyInput(key=key, modifiers=tuple(modifiers)))


def type_text(manager: ModeManager, text: str) -> None:
    for char in text:
        manager.handle_key(KeyInput(key=char, text=char))


def status_text(manager: ModeManager) -> str:
    return manager.context.status.text


def test_starts_in_edit_mode_with_help_message() -> None:
    manager = make_manager()

    assert manager.active_mode is not None
    assert manager.active_mode.name == "edit"
    assert status_text(manager) == "HELP: Ctrl-S = save | Ctrl-X = quit"


def test_typing_inserts_text_and_tracks_render_column() -> None:
    manager = make_manager(rows=24, cols=80)

    type_text(manager, "ab\tc")

    buffer = manager.context.buffer
    assert buffer.snapshot().lines == ("ab\tc",)
    assert buffer.cursor == (0, 4)
    assert manager.context.viewport.render_col == 9


def test_named_keys_run_bound_actions() -> None:
    manager = make_manager("hello", "world")

    press(manager, "DOWN")
    press(manager, "END")
    press(manager, "ENTER")
    type_text(manager, "!")
    press(manager, "UP")
    press(manager, "HOME")
    press(manager, "DELETE")

    assert manager.context.buffer.snapshot().lines == ("hello", "orld", "!")


def test_backspace_and_ctrl_h_delete_backward() -> None:
    manager = make_manager("abc")
    press(manager, "END")

    press(manager, "BACKSPACE")
    press(manager, "h", "ctrl")

    assert manager.context.buffer.snapshot().lines == ("a",)


def test_unbound_control_keys_are_ignored() -> None:
    manager = make_manager("abc")

    result = press(manager, "Q", "CTRL")

    assert result.status == "ignored"
    assert not result.consumed
    assert manager.context.buffer.dirty == 0


def test_escape_and_refresh_are_noops() -> None:
    manager = make_manager("abc")

    assert press(manager, "ESC").status == "noop"
    assert press(manager, "L", "CTRL").status == "noop"
    assert manager.context.buffer.snapshot().lines == ("abc",)


def test_clean_buffer_quits_immediately() -> None:
    events: List[object] = []
    bus = ModeBus()
    bus.subscribe("editor.quit", events.append)
    manager = create_default_manager(
        Buffer.from_lines(["x"]), rows=5, cols=20, bus=bus
    )

    result = press(manager, "X", "CTRL")

    assert result.status == "quit"
    assert len(events) == 1


def test_dirty_buffer_needs_repeated_quit() -> None:
    manager = make_manager("x")
    quits: List[object] = []
    manager.context.bus.subscribe("editor.quit", quits.append)
    type_text(manager, "y")

    for remaining in (3, 2, 1):
        result = press(manager, "x", "ctrl")
        assert result.status == "quit_refused"
        assert status_text(manager) == (
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-X {remaining} more times to quit."
        )
        assert not quits

    assert press(manager, "X", "CTRL").status == "quit"
    assert quits == [{"dirty": 1}]


def test_other_keys_reset_quit_confirmation() -> None:
    manager = make_manager("x")
    type_text(manager, "y")

    press(manager, "X", "CTRL")
    press(manager, "X", "CTRL")
    press(manager, "RIGHT")
    press(manager, "X", "CTRL")

    assert "Press Ctrl-X 3 more times" in status_text(manager)


def test_quit_times_zero_quits_dirty_buffer() -> None:
    manager = make_manager("x", config=EditorConfig(quit_times=0))
    type_text(manager, "y")

    assert press(manager, "X", "CTRL").status == "quit"


def test_save_existing_file(tmp_path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"abc\n")
    manager = create_default_manager(Buffer.open(str(path)), rows=5, cols=40)
    saved: List[object] = []
    manager.context.bus.subscribe("editor.saved", saved.append)
    type_text(manager, "z")

    result = press(manager, "S", "CTRL")

    assert result.status == "saved"
    assert path.read_bytes() == b"zabc\n"
    assert status_text(manager) == "5 bytes written to disk"
    assert manager.context.buffer.dirty == 0
    assert saved == [{"path": str(path), "bytes": 5}]


def test_save_untitled_prompts_for_name(tmp_path) -> None:
    manager = make_manager("hello")
    target = str(tmp_path / "named.txt")

    result = press(manager, "S", "CTRL")

    assert result.switch_to == "prompt"
    assert manager.active_mode is not None
    assert manager.active_mode.name == "prompt"
    assert status_text(manager) == "Save as: "

    type_text(manager, target + "x")
    press(manager, "BACKSPACE")
    assert status_text(manager) == f"Save as: {target}"

    press(manager, "ENTER")

    assert manager.active_mode.name == "edit"
    assert manager.context.buffer.document.filename == target
    assert status_text(manager) == "6 bytes written to disk"
    with open(target, "rb") as handle:
        assert handle.read() == b"hello\n"


def test_prompt_ignores_empty_submit_and_control_keys() -> None:
    manager = make_manager("hello")
    press(manager, "S", "CTRL")

    assert press(manager, "ENTER").status == "prompt_empty"
    assert press(manager, "UP").status == "ignored"
    assert manager.active_mode is not None
    assert manager.active_mode.name == "prompt"


def test_escape_aborts_save_prompt() -> None:
    manager = make_manager("hello")
    press(manager, "S", "CTRL")
    type_text(manager, "name.txt")

    result = press(manager, "ESC")

    assert result.status == "prompt_cancel"
    assert manager.active_mode is not None
    assert manager.active_mode.name == "edit"
    assert status_text(manager) == "Save aborted"
    assert manager.context.buffer.document.filename is None


def test_prompt_keys_do_not_edit_buffer() -> None:
    manager = make_manager("hello")
    press(manager, "S", "CTRL")

    type_text(manager, "abc")
    press(manager, "ESC")

    assert manager.context.buffer.snapshot().lines == ("hello",)
    assert manager.context.buffer.dirty == 0


def test_save_failure_reports_error_and_keeps_dirty(tmp_path) -> None:
    manager = make_manager("hello")
    type_text(manager, "x")
    manager.context.buffer.document.filename = str(tmp_path)

    result = press(manager, "S", "CTRL")

    assert result.status == "save_failed"
    assert status_text(manager).startswith("Can't save! I/O error: ")
    assert manager.context.buffer.dirty == 1


def test_viewport_follows_cursor_after_each_key() -> None:
    manager = make_manager(rows=3, cols=5)

    for _ in range(10):
        press(manager, "ENTER")
    type_text(manager, "abcdefgh")

    viewport = manager.context.viewport
    assert manager.context.buffer.cursor == (10, 8)
    assert viewport.row_offset == 8
    assert viewport.col_offset == 4
    assert viewport.screen_position(manager.context.buffer) == (2, 4)


def test_page_keys_use_viewport_height() -> None:
    manager = make_manager(*[f"line {i}" for i in range(50)], rows=10)

    press(manager, "PAGEDOWN")
    assert manager.context.buffer.cursor[0] == 19
    assert manager.context.viewport.row_offset == 10

    press(manager, "PAGEUP")
    assert manager.context.buffer.cursor[0] == 0
    assert manager.context.viewport.row_offset == 0


def test_context_builds_quit_guard_from_config() -> None:
    buffer = Buffer.from_lines(["x"])
    context = ModeContext(
        buffer=buffer,
        viewport=Viewport(rows=5, cols=20),
        config=EditorConfig(quit_times=5),
    )
    other = ModeContext(buffer=buffer, viewport=Viewport(rows=5, cols=20))

    assert context.quit_guard.remaining == 5
    assert other.quit_guard.remaining == 3
    assert context.quit_guard is not other.quit_guard

from __future__ import annotations

from typing import Callable, List, Optional

from rowedit.adapters.textual import TextualEditorAdapter, TextualUIHooks
from rowedit.buffer import Buffer
from rowedit.modes.mode_manager import create_default_manager
from rowedit.view import Frame


class Recorder:
    def __init__(self) -> None:
        self.frames: List[Frame] = []
        self.events: List[tuple[str, object | None]] = []
        self.logs: List[str] = []

    def hooks(self) -> TextualUIHooks:
        return TextualUIHooks(
            update_screen=self.frames.append,
            handle_event=lambda name, payload: self.events.append((name, payload)),
            log=self.logs.append,
        )


def make_adapter(
    *lines: str, clock: Optional[Callable[[], float]] = None
) -> tuple[TextualEditorAdapter, Recorder]:
    recorder = Recorder()
    manager = create_default_manager(
        Buffer.from_lines(list(lines)), rows=4, cols=40
    )
    return TextualEditorAdapter(manager, recorder.hooks(), clock=clock), recorder


def test_adapter_pushes_initial_frame() -> None:
    _, recorder = make_adapter()

    frame = recorder.frames[-1]
    assert len(frame.rows) == 4
    assert frame.rows[0] == "~"
    assert "rowedit editor" in frame.rows[1]
    assert frame.message == "HELP: Ctrl-S = save | Ctrl-X = quit"
    assert frame.cursor == (0, 0)


def test_adapter_redraws_after_each_key() -> None:
    adapter, recorder = make_adapter("")

    adapter.handle_textual_key("a", text="a")
    adapter.handle_textual_key("TAB", text="\t")
    adapter.handle_textual_key("b", text="b")

    frame = recorder.frames[-1]
    assert len(recorder.frames) == 4
    assert frame.rows == ("a       b", "~", "~", "~")
    assert frame.cursor == (0, 9)
    assert "(modified)" in frame.status_bar


def test_adapter_normalizes_modifiers() -> None:
    adapter, recorder = make_adapter("text")

    result = adapter.handle_textual_key("X", modifiers=("ctrl",))

    assert result.status == "quit"
    assert recorder.events == [("editor.quit", {"dirty": 0})]


def test_adapter_relays_prompt_events() -> None:
    adapter, recorder = make_adapter("text")

    adapter.handle_textual_key("S", modifiers=("CTRL",))
    adapter.handle_textual_key("ESC")

    names = [name for name, _ in recorder.events]
    assert names == ["prompt.start", "prompt.end"]
    assert recorder.frames[-1].message == "Save aborted"


def test_adapter_logs_key_and_result() -> None:
    adapter, recorder = make_adapter("text")

    adapter.handle_textual_key("RIGHT")

    assert recorder.logs[0].startswith("key -> mode='edit'")
    assert "key='RIGHT'" in recorder.logs[0]
    assert recorder.logs[1].startswith("result <-")
    assert "status='move'" in recorder.logs[1]


def test_status_message_expires() -> None:
    now = [100.0]
    adapter, recorder = make_adapter("text", clock=lambda: now[0])
    status = adapter.manager.context.status
    status.clock = lambda: 100.0
    status.set("hello")

    assert adapter.refresh().message == "hello"

    now[0] = 106.0
    assert adapter.refresh().message == ""
    assert recorder.frames[-1].message == ""

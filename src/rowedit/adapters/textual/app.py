"""Executable Textual app hosting the editor."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use rowedit.adapters.textual.app"
    ) from exc

from rowedit import __version__
from rowedit.buffer import Buffer, Document, FileOpenFailure
from rowedit.config import EditorConfig
from rowedit.modes.mode_manager import create_default_manager
from rowedit.runtime import telemetry
from rowedit.view import Frame

from .controller import TextualEditorAdapter, TextualUIHooks

# Rows taken by the status bar and the message bar.
CHROME_ROWS = 2

NAMED_KEYS = {
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "home": "HOME",
    "end": "END",
    "pageup": "PAGEUP",
    "pagedown": "PAGEDOWN",
    "delete": "DELETE",
    "backspace": "BACKSPACE",
    "enter": "ENTER",
    "escape": "ESC",
    "tab": "TAB",
}


def normalize_key(
    key: str, character: Optional[str], printable: bool
) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
    """Map a Textual key event onto ``(key, text, modifiers)``."""

    if key in NAMED_KEYS:
        return (NAMED_KEYS[key], "\t" if key == "tab" else None, ())
    if printable and character:
        return (character, character, ())
    if "+" in key:
        *modifiers, name = key.split("+")
        if name:
            return (
                NAMED_KEYS.get(name, name.upper()),
                None,
                tuple(mod.upper() for mod in modifiers),
            )
    return None


def frame_to_text(frame: Frame) -> Text:
    """Lay out the frame rows with the cursor cell shown in reverse video."""

    cursor_y, cursor_x = frame.cursor
    text = Text(no_wrap=True, overflow="crop")
    for y, row in enumerate(frame.rows):
        if y:
            text.append("\n")
        if y == cursor_y:
            row = row.ljust(cursor_x + 1)
            text.append(row[:cursor_x])
            text.append(row[cursor_x], style="reverse")
            text.append(row[cursor_x + 1 :])
        else:
            text.append(row)
    return text


class EditorApp(App[None], inherit_bindings=False):
    """Full-screen editor: text area, status bar and message bar.

    Textual's own bindings are dropped so every key, Ctrl+Q included, goes
    through the editor keymaps and the quit guard.
    """

    TITLE = f"rowedit {__version__}"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }

    #text-area {
        height: 1fr;
    }

    #status-bar {
        height: 1;
        text-style: reverse;
    }

    #message-bar {
        height: 1;
    }
    """

    def __init__(self, buffer: Buffer, *, config: EditorConfig) -> None:
        super().__init__()
        self.buffer = buffer
        self.config = config
        self.adapter: TextualEditorAdapter | None = None
        self._text_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None
        self.logger = telemetry.get_logger("rowedit.adapters.textual")

    def compose(self) -> ComposeResult:
        self._text_widget = Static("", id="text-area")
        self._status_widget = Static("", id="status-bar")
        self._message_widget = Static("", id="message-bar")
        yield self._text_widget
        yield self._status_widget
        yield self._message_widget

    def on_mount(self) -> None:
        # The size is read once; resizing is not tracked.
        rows = max(1, self.size.height - CHROME_ROWS)
        cols = max(1, self.size.width)
        manager = create_default_manager(
            self.buffer, rows=rows, cols=cols, config=self.config
        )
        hooks = TextualUIHooks(
            update_screen=self._update_screen,
            handle_event=self._handle_event,
            log=self.logger.debug,
        )
        self.adapter = TextualEditorAdapter(manager, hooks)
        self.set_interval(1.0, self._expire_message)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = normalize_key(event.key, event.character, event.is_printable)
        event.stop()
        event.prevent_default()
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)

    def _expire_message(self) -> None:
        if self.adapter:
            self.adapter.refresh()

    def _update_screen(self, frame: Frame) -> None:
        if self._text_widget:
            self._text_widget.update(frame_to_text(frame))
        if self._status_widget:
            self._status_widget.update(Text(frame.status_bar, no_wrap=True))
        if self._message_widget:
            self._message_widget.update(Text(frame.message, no_wrap=True))

    def _handle_event(self, name: str, payload: object | None) -> None:
        if name == "editor.quit":
            self.exit()


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {parsed}")
    return parsed


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rowedit", description="Edit a text file in the terminal."
    )
    parser.add_argument("path", nargs="?", help="File to open")
    parser.add_argument(
        "--tab-stop",
        type=_positive_int,
        default=None,
        help="Columns per tab stop (default: ROWEDIT_TAB_STOP or 8)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (default: ROWEDIT_LOG_FILE)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        default=None,
        help="Named telemetry preset",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset, log_file=args.log_file)

    config = EditorConfig.from_env()
    if args.tab_stop is not None:
        config = replace(config, tab_stop=args.tab_stop)

    if args.path:
        try:
            buffer = Buffer.open(args.path, tab_stop=config.tab_stop)
        except FileOpenFailure as exc:
            print(f"rowedit: {args.path}: {exc}", file=sys.stderr)
            return 1
    else:
        buffer = Buffer(document=Document(tab_stop=config.tab_stop))

    EditorApp(buffer, config=config).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual run
    raise SystemExit(main())

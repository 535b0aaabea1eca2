from rowedit import __version__
from rowedit.buffer import Buffer
from rowedit.config import EditorConfig
from rowedit.view import StatusMessage, Viewport, compose_frame
from rowedit.view.compositor import status_bar, welcome_banner


def make_frame(buffer: Buffer, *, rows: int = 6, cols: int = 30, now: float = 0.0):
    viewport = Viewport(rows=rows, cols=cols)
    viewport.scroll(buffer)
    status = StatusMessage(clock=lambda: 0.0)
    status.set("note")
    return compose_frame(buffer, viewport, status, EditorConfig(), now=now)


def test_welcome_banner_is_centred_with_filler() -> None:
    text = f"rowedit editor -- version {__version__}"
    cols = len(text) + 10

    banner = welcome_banner(cols)

    assert banner == "~" + " " * 4 + text


def test_welcome_banner_is_cropped_to_width() -> None:
    assert welcome_banner(7) == "rowedit"


def test_empty_buffer_shows_banner_a_third_down() -> None:
    frame = make_frame(Buffer(), rows=6, cols=60)

    assert frame.rows[2].startswith("~ ")
    assert "rowedit editor" in frame.rows[2]
    assert [row for i, row in enumerate(frame.rows) if i != 2] == ["~"] * 5


def test_rows_past_document_end_show_filler_only() -> None:
    frame = make_frame(Buffer.from_lines(["one", "two"]), rows=4)

    assert frame.rows == ("one", "two", "~", "~")


def test_status_bar_layout() -> None:
    buffer = Buffer.from_lines(["a", "b", "c"], cursor=(1, 0))
    buffer.document.filename = "a-rather-long-file-name.txt"
    buffer.insert_char("x")

    bar = status_bar(buffer, 50)

    assert bar.startswith("a-rather-long-file-n - 3 lines (modified)")
    assert bar.endswith("2/3")
    assert len(bar) == 50


def test_status_bar_for_untitled_buffer() -> None:
    bar = status_bar(Buffer(), 30)

    assert bar.startswith("[No Name] - 0 lines")
    assert bar.endswith("1/0")


def test_status_bar_narrow_terminal_keeps_width() -> None:
    bar = status_bar(Buffer(), 8)

    assert bar == "[No Name"


def test_message_respects_timeout() -> None:
    buffer = Buffer.from_lines(["x"])

    assert make_frame(buffer, now=4.9).message == "note"
    assert make_frame(buffer, now=5.0).message == ""


def test_frame_cursor_is_relative_to_viewport() -> None:
    buffer = Buffer.from_lines([str(i) for i in range(20)], cursor=(12, 1))

    frame = make_frame(buffer, rows=5)

    assert frame.cursor == (4, 1)
    assert frame.rows[0] == "8"

import pytest

from rowedit.buffer import Line, column_to_render_column, expand_tabs, is_insertable

SAMPLE_LINES = [
    "",
    "plain text",
    "\t",
    "\tindented",
    "ab\tc",
    "1234567\tx",
    "12345678\tx",
    "\t\t\t",
    "a\tb\tc\td",
    "trailing\t",
]


def test_tab_expands_to_next_stop() -> None:
    assert expand_tabs("ab\tc") == "ab" + " " * 6 + "c"
    assert expand_tabs("\tx") == " " * 8 + "x"


def test_tab_on_a_stop_emits_full_width() -> None:
    assert expand_tabs("12345678\tx") == "12345678" + " " * 8 + "x"


def test_tab_one_before_stop_emits_single_space() -> None:
    assert expand_tabs("1234567\tx") == "1234567 x"


def test_custom_tab_stop() -> None:
    assert expand_tabs("a\tb", tab_stop=4) == "a   b"
    assert column_to_render_column("a\tb", 2, tab_stop=4) == 4


@pytest.mark.parametrize("content", SAMPLE_LINES)
def test_prefix_mapping_matches_full_expansion(content: str) -> None:
    assert column_to_render_column(content, len(content)) == len(expand_tabs(content))


@pytest.mark.parametrize("content", SAMPLE_LINES)
def test_render_is_never_shorter_than_content(content: str) -> None:
    render = expand_tabs(content)
    # A tab one column before a stop renders as a single space.
    widening_tabs = [
        col
        for col, char in enumerate(content)
        if char == "\t" and column_to_render_column(content, col) % 8 != 7
    ]

    assert len(render) >= len(content)
    assert (len(render) > len(content)) == bool(widening_tabs)


def test_tab_just_before_stop_keeps_length() -> None:
    assert len(expand_tabs("1234567\tx")) == len("1234567\tx")
    assert len(expand_tabs("1234567\t\t")) == len("1234567\t\t") + 7


def test_column_mapping_per_prefix() -> None:
    content = "ab\tc"

    assert [column_to_render_column(content, col) for col in range(5)] == [
        0,
        1,
        2,
        8,
        9,
    ]


def test_column_mapping_clamps_out_of_range() -> None:
    assert column_to_render_column("ab", 10) == 2
    assert column_to_render_column("ab", -1) == 0


def test_line_render_is_rebuilt_lazily() -> None:
    line = Line("a\tb")
    assert not line.is_rendered

    assert line.render == "a       b"
    assert line.is_rendered

    line.content = "\t"
    assert not line.is_rendered
    assert line.render == " " * 8
    assert line.render_column(1) == 8


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("a", True),
        (" ", True),
        ("\t", True),
        ("~", True),
        ("\xe9", True),
        ("\n", False),
        ("\x1b", False),
        ("\x7f", False),
        ("\x85", False),
        ("ab", False),
        ("", False),
        (None, False),
        ("€", False),
    ],
)
def test_is_insertable(char: str | None, expected: bool) -> None:
    assert is_insertable(char) is expected

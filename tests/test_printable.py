import pytest

from monoopoly.colors import ColorType, colorize
from monoopoly.config import FIELD_HEIGHT, FIELD_WIDTH
from monoopoly.printable import PrintableField


def test_border_line():
    field = PrintableField()
    assert field.render_line(-1) == "+" + "-" * FIELD_WIDTH + "+"


@pytest.mark.parametrize("line", range(FIELD_HEIGHT))
def test_content_lines_have_fixed_width(line):
    field = PrintableField()
    field.set_line(line, "Mayfair")
    rendered = field.render_line(line)
    assert len(rendered) == FIELD_WIDTH + 2
    assert rendered[0] == "|" and rendered[-1] == "|"


def test_short_content_is_centred_with_extra_space_on_right():
    field = PrintableField()
    field.set_line(1, "Start")
    inner = field.render_line(1)[1:-1]
    assert inner.strip() == "Start"
    left = len(inner) - len(inner.lstrip())
    right = len(inner) - len(inner.rstrip())
    assert 0 <= right - left <= 1


def test_long_content_is_truncated():
    field = PrintableField()
    field.set_line(0, "ABCDEFGHIJKLMN")
    assert field.render_line(0) == "|" + "ABCDEFGHIJKLMN"[:FIELD_WIDTH] + "|"


def test_out_of_range_set_line_is_ignored():
    field = PrintableField()
    field.set_line(FIELD_HEIGHT, "x")
    field.set_line(-2, "y")
    assert field.lines == [""] * FIELD_HEIGHT


def test_out_of_range_render_line_is_blank():
    field = PrintableField()
    assert field.render_line(FIELD_HEIGHT) == " " * FIELD_WIDTH


def test_colored_rendering_wraps_plain_text():
    field = PrintableField(ColorType.PLAYER2)
    field.set_line(2, "7")
    assert field.render_line(2, use_color=True) == colorize(
        field.render_line(2), ColorType.PLAYER2
    )
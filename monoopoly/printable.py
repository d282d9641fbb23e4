"""Fixed-size text rendering of a single board field."""

from .colors import ColorType, colorize
from .config import FIELD_HEIGHT, FIELD_WIDTH

BORDER_LINE = -1


class PrintableField:
    """The text lines of one field, drawn inside a box of fixed width."""

    def __init__(self, color: ColorType = ColorType.DEFAULT):
        self.color = color
        self.lines = [""] * FIELD_HEIGHT

    def set_line(self, line_number: int, content: str) -> None:
        """Set a content line; numbers outside the field are ignored."""
        if 0 <= line_number < len(self.lines):
            self.lines[line_number] = content

    def render_line(self, line_number: int, use_color: bool = False) -> str:
        """Render a line: -1 is the border, others are centred content."""
        if line_number == BORDER_LINE:
            text = "+" + "-" * FIELD_WIDTH + "+"
        elif not 0 <= line_number < len(self.lines):
            text = " " * FIELD_WIDTH
        else:
            content = self.lines[line_number]
            missing = FIELD_WIDTH - len(content)
            if missing > 0:
                left = missing // 2
                content = " " * left + content + " " * (missing - left)
            else:
                content = content[:FIELD_WIDTH]
            text = f"|{content}|"
        return colorize(text, self.color) if use_color else text
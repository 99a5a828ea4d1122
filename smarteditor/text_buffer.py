"""Line-oriented text buffer with a cursor and an undo/redo history."""

from __future__ import annotations

from dataclasses import dataclass, field


def _split_text(text: str) -> list[str]:
    """Split text into lines; a trailing newline does not start a new line."""
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return parts or [""]


@dataclass
class UndoRedoAction:
    """One recorded editing action and the cursor position it happened at."""

    action: str
    old_text: str
    new_text: str
    line: int
    column: int


@dataclass
class TextBuffer:
    """Editable lines of text with a cursor position.

    The buffer always holds at least one line.
    """

    lines: list[str] = field(default_factory=lambda: [""])
    cursor_line: int = 0
    cursor_col: int = 0
    undo_stack: list[UndoRedoAction] = field(default_factory=list)
    redo_stack: list[UndoRedoAction] = field(default_factory=list)

    def _ensure_cursor_line(self) -> None:
        if self.cursor_line >= len(self.lines):
            self.lines.extend([""] * (self.cursor_line + 1 - len(self.lines)))

    # Editing

    def insert_char(self, c: str) -> None:
        """Insert one character at the cursor and move past it."""
        self._ensure_cursor_line()
        line = self.lines[self.cursor_line]
        self.cursor_col = min(self.cursor_col, len(line))
        self.lines[self.cursor_line] = line[: self.cursor_col] + c + line[self.cursor_col :]
        self.cursor_col += 1

    def insert_string(self, text: str) -> None:
        """Insert text at the cursor; newlines split the line."""
        for c in text:
            if c == "\n":
                self.new_line()
            else:
                self.insert_char(c)

    def delete_char(self) -> None:
        """Delete the character under the cursor, joining lines at line end."""
        if self.cursor_line >= len(self.lines):
            return
        line = self.lines[self.cursor_line]
        if self.cursor_col < len(line):
            self.lines[self.cursor_line] = line[: self.cursor_col] + line[self.cursor_col + 1 :]
        elif self.cursor_line < len(self.lines) - 1:
            self.lines[self.cursor_line] = line + self.lines.pop(self.cursor_line + 1)

    def delete_backspace(self) -> None:
        """Delete the character before the cursor, joining lines at line start."""
        if self.cursor_line >= len(self.lines):
            return
        line = self.lines[self.cursor_line]
        if self.cursor_col > 0:
            col = self.cursor_col
            self.lines[self.cursor_line] = line[: col - 1] + line[col:]
            self.cursor_col -= 1
        elif self.cursor_line > 0:
            previous = self.lines[self.cursor_line - 1]
            self.lines[self.cursor_line - 1] = previous + line
            del self.lines[self.cursor_line]
            self.cursor_line -= 1
            self.cursor_col = len(previous)

    def new_line(self) -> None:
        """Split the current line at the cursor and move to the new line."""
        self._ensure_cursor_line()
        line = self.lines[self.cursor_line]
        self.lines[self.cursor_line] = line[: self.cursor_col]
        self.lines.insert(self.cursor_line + 1, line[self.cursor_col :])
        self.cursor_line += 1
        self.cursor_col = 0

    # Navigation

    def move_cursor(self, line: int, col: int) -> None:
        """Place the cursor, clamped to the buffer's contents."""
        self.cursor_line = max(0, min(line, len(self.lines) - 1))
        if self.cursor_line < len(self.lines):
            self.cursor_col = max(0, min(col, len(self.lines[self.cursor_line])))
        else:
            self.cursor_col = 0

    def cursor_up(self) -> None:
        if self.cursor_line > 0:
            self.cursor_line -= 1
            self.cursor_col = min(self.cursor_col, len(self.lines[self.cursor_line]))

    def cursor_down(self) -> None:
        if self.cursor_line < len(self.lines) - 1:
            self.cursor_line += 1
            self.cursor_col = min(self.cursor_col, len(self.lines[self.cursor_line]))

    def cursor_left(self) -> None:
        if self.cursor_col > 0:
            self.cursor_col -= 1
        elif self.cursor_line > 0:
            self.cursor_line -= 1
            self.cursor_col = len(self.lines[self.cursor_line])

    def cursor_right(self) -> None:
        if self.cursor_line >= len(self.lines):
            return
        if self.cursor_col < len(self.lines[self.cursor_line]):
            self.cursor_col += 1
        elif self.cursor_line < len(self.lines) - 1:
            self.cursor_line += 1
            self.cursor_col = 0

    def cursor_home(self) -> None:
        self.cursor_col = 0

    def cursor_end(self) -> None:
        if self.cursor_line < len(self.lines):
            self.cursor_col = len(self.lines[self.cursor_line])

    def cursor_page_up(self, page_height: int) -> None:
        self.cursor_line = max(0, self.cursor_line - page_height)

    def cursor_page_down(self, page_height: int) -> None:
        self.cursor_line = min(len(self.lines) - 1, self.cursor_line + page_height)

    # History

    def undo(self) -> None:
        """Move the latest recorded action onto the redo stack."""
        if self.undo_stack:
            self.redo_stack.append(self.undo_stack.pop())

    def redo(self) -> None:
        """Move the latest undone action back onto the undo stack."""
        if self.redo_stack:
            self.undo_stack.append(self.redo_stack.pop())

    def record_action(self, action: str, old_text: str, new_text: str) -> None:
        """Record an action at the current cursor; this clears the redo stack."""
        self.undo_stack.append(
            UndoRedoAction(action, old_text, new_text, self.cursor_line, self.cursor_col)
        )
        self.redo_stack.clear()

    # Content

    @property
    def text(self) -> str:
        """The whole buffer, lines joined by newlines."""
        return "\n".join(self.lines)

    def set_text(self, text: str) -> None:
        """Replace the contents and put the cursor at the start."""
        self.lines = _split_text(text)
        self.cursor_line = 0
        self.cursor_col = 0

    def is_empty(self) -> bool:
        return len(self.lines) == 1 and not self.lines[0]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_length(self, line_num: int) -> int:
        """Length of a line, or 0 for a line number outside the buffer."""
        if 0 <= line_num < len(self.lines):
            return len(self.lines[line_num])
        return 0
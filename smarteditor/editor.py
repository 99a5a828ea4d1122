"""Console text editor driven by single-letter commands."""

from __future__ import annotations

import os
import subprocess
import sys
from enum import Enum
from typing import Callable, TextIO

from smarteditor.file_manager import FileManager
from smarteditor.search_replace import SearchReplace
from smarteditor.syntax_highlighter import SyntaxHighlighter
from smarteditor.text_buffer import TextBuffer

_BANNER = (
    "\n╔════════════════════════════════════╗\n"
    "║  Smart Text Editor v1.0 - Console  ║\n"
    "╚════════════════════════════════════╝\n\n"
    "Commands:\n"
    "  w/a/s/d : Move cursor\n"
    "  i       : Insert text\n"
    "  f       : Find\n"
    "  r       : Replace\n"
    "  c       : Save (commit)\n"
    "  z       : Undo\n"
    "  y       : Redo\n"
    "  q       : Quit\n"
    "  h/e     : Home/End\n\n"
)


class EditorMode(Enum):
    NORMAL = "normal"
    SEARCH = "search"
    REPLACE = "replace"
    SAVE_AS = "save_as"


def _clear_terminal() -> None:
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


class _Input:
    """Character-level reader offering whole lines and whitespace-separated words."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _getc(self) -> str:
        if self._pending:
            c, self._pending = self._pending, ""
            return c
        return self._stream.read(1)

    def read_line(self) -> str | None:
        """Next line without its newline, or None at end of input."""
        chars: list[str] = []
        while True:
            c = self._getc()
            if c == "":
                return "".join(chars) if chars else None
            if c == "\n":
                return "".join(chars)
            chars.append(c)

    def read_word(self) -> str | None:
        """Next whitespace-delimited word, or None at end of input."""
        c = self._getc()
        while c and c.isspace():
            c = self._getc()
        if not c:
            return None
        chars = []
        while c and not c.isspace():
            chars.append(c)
            c = self._getc()
        if c:
            self._pending = c
        return "".join(chars)


class TextEditor:
    """Buffer, search, highlighting and file handling behind a command loop."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear_screen: Callable[[], None] | None = None,
    ) -> None:
        self.buffer = TextBuffer()
        self.highlighter = SyntaxHighlighter()
        self.search = SearchReplace()
        self.file_manager = FileManager()
        self.mode = EditorMode.NORMAL
        self.screen_width = 120
        self.screen_height = 30
        self.scroll_line = 0
        self.scroll_col = 0
        self.input_buffer = ""
        self._input = _Input(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self._clear_screen = clear_screen if clear_screen is not None else _clear_terminal

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    # Rendering

    def render_main_window(self) -> None:
        """Clear the screen and draw the visible lines with line numbers."""
        self._clear_screen()
        cursor_line = self.buffer.cursor_line
        cursor_col = self.buffer.cursor_col
        rows = self.screen_height - 3
        cols = self.screen_width - 15

        if cursor_line < self.scroll_line:
            self.scroll_line = cursor_line
        if cursor_line >= self.scroll_line + rows:
            self.scroll_line = cursor_line - rows + 1
        if cursor_col < self.scroll_col:
            self.scroll_col = cursor_col
        if cursor_col >= self.scroll_col + cols:
            self.scroll_col = cursor_col - cols + 1

        visible = self.buffer.lines[self.scroll_line : self.scroll_line + rows]
        width = self.screen_width - 10
        self._write(
            "".join(
                f"{number + 1:4d} | {line[:width]}\n"
                for number, line in enumerate(visible, start=self.scroll_line)
            )
        )

    def render_status_bar(self) -> None:
        """Draw the boxed status line: cursor position, file name, modified flag."""
        name = self.file_manager.current_file or "Untitled"
        status = f"Line:{self.buffer.cursor_line + 1} Col:{self.buffer.cursor_col + 1} | {name}"
        if self.file_manager.is_modified:
            status += " [*]"
        border = "+" + "-" * (self.screen_width - 2) + "+\n"
        padding = " " * max(0, self.screen_width - 3 - len(status))
        self._write(f"\n{border}| {status}{padding} |\n{border}")

    # Editing

    def auto_indent(self) -> None:
        """Indent the cursor line like the line above; a tab counts as four spaces."""
        if self.buffer.cursor_line <= 0:
            return
        indent = 0
        for c in self.buffer.lines[self.buffer.cursor_line - 1]:
            if c == " ":
                indent += 1
            elif c == "\t":
                indent += 4
            else:
                break
        for _ in range(indent):
            self.buffer.insert_char(" ")

    def handle_key(self, ch: str) -> bool:
        """Act on one command character; returns True when it asks to quit."""
        buffer = self.buffer
        files = self.file_manager
        moves = {
            "w": buffer.cursor_up,
            "s": buffer.cursor_down,
            "a": buffer.cursor_left,
            "d": buffer.cursor_right,
            "h": buffer.cursor_home,
            "e": buffer.cursor_end,
            "z": buffer.undo,
            "y": buffer.redo,
        }
        if ch in moves:
            moves[ch]()
        elif ch == "f":
            self.mode = EditorMode.SEARCH
            self.input_buffer = ""
            self._write("\nFind: ")
            self.input_buffer = self._input.read_word() or ""
            self.search.search_term = self.input_buffer
            self.perform_search()
            self.mode = EditorMode.NORMAL
        elif ch == "r":
            self.mode = EditorMode.REPLACE
            self._write("\nFind: ")
            find_term = self._input.read_word() or ""
            replace_term = self._input.read_word() or ""
            self.search.search_term = find_term
            self.search.replace_term = replace_term
            self.perform_replace()
            self.mode = EditorMode.NORMAL
        elif ch == "i":
            self._write("\nInsert text (type '.' on new line to finish):\n")
            while (line := self._input.read_line()) is not None and line != ".":
                for c in line:
                    buffer.insert_char(c)
                buffer.new_line()
            files.is_modified = True
        elif ch == "\n":
            buffer.new_line()
            self.auto_indent()
            files.is_modified = True
        elif ch == "\t":
            buffer.insert_string("    ")
            files.is_modified = True
        elif ch == "c":
            filename = files.current_file
            if not filename:
                self._write("\nFilename: ")
                filename = self._input.read_line() or ""
            try:
                files.save_file(filename, buffer.lines)
            except OSError as error:
                self._write(f"\nCould not save: {error}\n")
            files.is_modified = False
        elif ch == "q":
            return True
        elif ch == "\b":
            buffer.delete_backspace()
            files.is_modified = True
        elif 32 <= ord(ch) < 127:
            buffer.insert_char(ch)
            files.is_modified = True
        return False

    def perform_search(self) -> None:
        """Move the cursor to the next match of the search term and report it."""
        result = self.search.find_next(
            self.buffer.lines, self.buffer.cursor_line, self.buffer.cursor_col
        )
        if result is None:
            self._write("Not found!\n")
            return
        self.buffer.move_cursor(result.line, result.column)
        self._write(f"Found at line {result.line + 1}, column {result.column + 1}\n")

    def perform_replace(self) -> None:
        """Replace the next match and place the cursor after the replacement."""
        line, col = self.buffer.cursor_line, self.buffer.cursor_col
        position = self.search.replace_next(self.buffer.lines, line, col)
        if position is not None:
            line, col = position
        self.buffer.move_cursor(line, col)
        self.file_manager.is_modified = True

    # Files

    def open_file(self, filepath: str) -> bool:
        """Make a file current and pick its language; returns whether it could be read.

        The buffer is filled from the file manager's own text.
        """
        try:
            self.file_manager.load_file(filepath)
        except OSError:
            return False
        self.buffer.set_text(self.file_manager.text())
        self.highlighter.set_language(filepath)
        return True

    def new_file(self) -> None:
        self.buffer = TextBuffer()

    def run(self) -> None:
        """Read command lines and apply each character until 'q' or end of input."""
        self._write(_BANNER)
        while True:
            self.render_main_window()
            self.render_status_bar()
            self._write("\nCommand: ")
            command = self._input.read_line()
            if command is None:
                break
            if any(self.handle_key(ch) for ch in command):
                break
        self._write("\nGoodbye!\n")


def main(argv: list[str] | None = None) -> int:
    """Start the editor, opening the file named by the first argument if any."""
    args = sys.argv[1:] if argv is None else argv
    try:
        editor = TextEditor()
        if args:
            editor.open_file(args[0])
        else:
            editor.new_file()
        editor.run()
    except Exception as error:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
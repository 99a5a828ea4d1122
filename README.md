# smarteditor

A small console text editor. The document is kept as a list of lines with a
cursor. The package also finds and replaces text over a list of lines,
splits C++ and Python lines into classified tokens, and loads and saves
plain text files as lists of lines.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the editor

```
smart-editor            # start with an empty document
smart-editor notes.py   # start with notes.py as the current file
```

Each round the editor clears the terminal, draws the visible lines with
line numbers (up to 27 lines) and a boxed status bar showing the cursor
line and column, the file name (or `Untitled`) and `[*]` when there are
unsaved changes. It then reads one line of commands; every character of
that line is one command:

| Key     | Action                                                        |
|---------|---------------------------------------------------------------|
| w a s d | move the cursor up, left, down, right                         |
| h / e   | go to the start / end of the line                             |
| i       | insert the following input lines; end with a line holding `.` |
| f       | read a word and move to its next occurrence, wrapping round   |
| r       | read two words and replace the next occurrence of the first   |
| c       | save; asks for a file name if there is no current file        |
| z / y   | undo / redo (see below)                                       |
| q       | quit                                                          |
| tab     | insert four spaces                                            |

Any other printable character is typed into the document at the cursor. The
editor stops on `q` or at the end of its input and prints `Goodbye!`.

## Using it as a library

```python
from smarteditor.text_buffer import TextBuffer
from smarteditor.search_replace import SearchReplace
from smarteditor.syntax_highlighter import SyntaxHighlighter

buf = TextBuffer()
buf.insert_string("int x = 1;\nreturn x;")

search = SearchReplace()
search.search_term = "x"
search.replace_term = "y"
print(search.replace_all(buf.lines))   # Replaced 2 occurrences

hl = SyntaxHighlighter()
hl.set_language("main.cpp")
for token in hl.tokenize_line(buf.lines[0]):
    print(token.type, token.start, token.length)
```

- `smarteditor.text_buffer.TextBuffer`: lines, cursor movement, inserting
  and deleting characters, splitting and joining lines, `text`,
  `set_text`, and an undo/redo history of `UndoRedoAction` records.
- `smarteditor.search_replace.SearchReplace`: `find_all`, `find_next` and
  `find_previous` (both wrap round and return a `SearchResult` or `None`),
  `replace_all` and `replace_next`, which change the list in place.
- `smarteditor.syntax_highlighter`: `detect_language`, `SyntaxHighlighter`
  with `tokenize_line`, `identify_token` and `color_pair`; `Token`,
  `TokenType` and `Language`.
- `smarteditor.file_manager.FileManager`: `load_file` returns the lines of a
  file, `save_file` / `save_as_file` write lines joined by newlines, with
  the current file name and modified flag; both raise `OSError` on failure.
- `smarteditor.editor.TextEditor` ties these together; `main` is the
  `smart-editor` command.

## What it does not do

- Opening a file does not show its contents. `smart-editor notes.py` makes
  `notes.py` the current file and picks the language from its name, but the
  document starts empty. Saving with `c` then writes the document to that
  file, replacing what was there.
- Undo and redo only move recorded entries between two history stacks;
  they do not change the text, and the editor records no entries itself.
- Tokens are not drawn in colour: the editor prints plain text, and
  `color_pair` only returns the number of a token type.
- There is no full-screen or key-by-key mode; commands are read a line at a
  time from standard input.
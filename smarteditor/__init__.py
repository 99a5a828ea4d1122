"""A small console text editor with a line buffer, search and replace, line tokenizing and file loading and saving."""

__version__ = "1.0.0"
__all__ = ["editor", "file_manager", "search_replace", "syntax_highlighter", "text_buffer"]
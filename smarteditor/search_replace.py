"""Find and replace over a list of lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """A match: its line, starting column and length."""

    line: int
    column: int
    length: int


@dataclass
class SearchReplace:
    """Holds a search term and a replacement and applies them to lines."""

    search_term: str = ""
    replace_term: str = ""

    def _hit(self, line: int, column: int) -> SearchResult:
        return SearchResult(line, column, len(self.search_term))

    def find_all(self, lines: list[str]) -> list[SearchResult]:
        """Every match, overlapping ones included, in reading order."""
        term = self.search_term
        if not term:
            return []
        results = []
        for index, line in enumerate(lines):
            pos = line.find(term)
            while pos != -1:
                results.append(self._hit(index, pos))
                pos = line.find(term, pos + 1)
        return results

    def find_next(self, lines: list[str], start_line: int, start_col: int) -> SearchResult | None:
        """First match at or after the position, wrapping to the top."""
        term = self.search_term
        if not term:
            return None
        for index in range(max(start_line, 0), len(lines)):
            pos = lines[index].find(term, start_col if index == start_line else 0)
            if pos != -1:
                return self._hit(index, pos)
        for index in range(min(start_line, len(lines))):
            pos = lines[index].find(term)
            if pos != -1:
                return self._hit(index, pos)
        return None

    def find_previous(
        self, lines: list[str], start_line: int, start_col: int
    ) -> SearchResult | None:
        """Last match starting before the position, wrapping to the bottom."""
        term = self.search_term
        if not term:
            return None
        for index in range(min(start_line, len(lines) - 1), -1, -1):
            line = lines[index]
            end = start_col if index == start_line else len(line)
            last_start = end - 1 if end > 0 else 0
            pos = line.rfind(term, 0, last_start + len(term))
            if pos != -1:
                return self._hit(index, pos)
        for index in range(len(lines) - 1, start_line, -1):
            pos = lines[index].rfind(term)
            if pos != -1:
                return self._hit(index, pos)
        return None

    def replace_all(self, lines: list[str]) -> str:
        """Replace every match in place and report how many were replaced."""
        count = 0
        if self.search_term:
            for index, line in enumerate(lines):
                found = line.count(self.search_term)
                if found:
                    lines[index] = line.replace(self.search_term, self.replace_term)
                    count += found
        return f"Replaced {count} occurrences"

    def replace_next(self, lines: list[str], line: int, col: int) -> tuple[int, int] | None:
        """Replace the next match in place.

        Returns the cursor position just after the replacement, or None when
        nothing matched.
        """
        result = self.find_next(lines, line, col)
        if result is None:
            return None
        text = lines[result.line]
        lines[result.line] = (
            text[: result.column] + self.replace_term + text[result.column + result.length :]
        )
        return result.line, result.column + len(self.replace_term)
"""Line tokenizer that classifies pieces of source code for highlighting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token; the value doubles as the colour pair number."""

    NORMAL = 0
    KEYWORD = 1
    STRING = 2
    COMMENT = 3
    NUMBER = 4
    OPERATOR = 5
    PREPROCESSOR = 6
    FUNCTION = 7
    TYPE = 8


class Language(Enum):
    CPP = "cpp"
    PYTHON = "python"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Token:
    """A classified span of a line."""

    type: TokenType
    start: int
    length: int


CPP_KEYWORDS = frozenset({
    "if", "else", "while", "for", "do", "switch", "case", "default",
    "break", "continue", "return", "goto", "try", "catch", "throw",
    "using", "namespace", "class", "struct", "union", "enum",
    "public", "private", "protected", "virtual", "static", "const",
    "volatile", "extern", "inline", "template", "typename", "sizeof",
    "new", "delete", "this", "nullptr", "true", "false",
})

CPP_TYPES = frozenset({
    "void", "int", "float", "double", "char", "bool", "long", "short",
    "unsigned", "signed", "auto", "std",
})

PYTHON_KEYWORDS = frozenset({
    "if", "elif", "else", "while", "for", "break", "continue",
    "return", "def", "class", "try", "except", "finally", "raise",
    "import", "from", "as", "with", "pass", "assert", "yield",
    "lambda", "and", "or", "not", "in", "is", "None", "True", "False",
})

_OPERATORS = "+-*/%=<>!&|^~()[]{}.,;:?"
_WHITESPACE = " \t\n\v\f\r"
_QUOTES = "\"'"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_word_char(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalnum())


def detect_language(filename: str) -> Language:
    """Guess the language from extensions appearing anywhere in the name."""
    if any(ext in filename for ext in (".cpp", ".cc", ".cxx", ".h")):
        return Language.CPP
    if ".py" in filename:
        return Language.PYTHON
    return Language.UNKNOWN


class SyntaxHighlighter:
    """Splits lines into tokens according to the current language."""

    def __init__(self) -> None:
        self.language = Language.CPP

    def set_language(self, filename: str) -> None:
        self.language = detect_language(filename)

    def identify_token(self, token: str, after_hash: bool = False) -> TokenType:
        """Classify a single word or character."""
        if not token:
            return TokenType.NORMAL
        if _is_digit(token[0]) or (token[0] == "." and len(token) > 1):
            return TokenType.NUMBER
        if after_hash:
            return TokenType.PREPROCESSOR
        if self.language is Language.CPP:
            if token in CPP_KEYWORDS:
                return TokenType.KEYWORD
            if token in CPP_TYPES:
                return TokenType.TYPE
        elif self.language is Language.PYTHON and token in PYTHON_KEYWORDS:
            return TokenType.KEYWORD
        if len(token) == 1 and token in _OPERATORS:
            return TokenType.OPERATOR
        return TokenType.NORMAL

    def tokenize_line(self, line: str) -> list[Token]:
        """Tokens of one line, in order; whitespace produces none."""
        tokens: list[Token] = []
        word = ""
        in_string = False
        quote = ""
        size = len(line)

        for i, ch in enumerate(line):
            if not in_string and i < size - 1 and ch == "/" and line[i + 1] == "/":
                tokens.append(Token(TokenType.COMMENT, i, size - i))
                break

            if ch in _QUOTES and (i == 0 or line[i - 1] != "\\"):
                if not in_string:
                    in_string = True
                    quote = ch
                    word = ""
                elif ch == quote:
                    in_string = False
                    tokens.append(Token(TokenType.STRING, i - len(word) - 1, len(word) + 2))
                    word = ""
                    continue

            if in_string:
                word += ch
                continue

            if _is_word_char(ch):
                word += ch
                continue

            if word:
                kind = self.identify_token(word, i > 0 and line[i - 1] == "#")
                tokens.append(Token(kind, i - len(word), len(word)))
                word = ""
            if ch not in _WHITESPACE:
                tokens.append(Token(self.identify_token(ch), i, 1))

        if word:
            tokens.append(Token(self.identify_token(word), size - len(word), len(word)))
        return tokens

    def color_pair(self, token_type: TokenType) -> int:
        """Colour pair number used to draw a token of this type."""
        return token_type.value
import pytest

from smarteditor.syntax_highlighter import (
    Language,
    SyntaxHighlighter,
    Token,
    TokenType,
    detect_language,
)


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("main.cpp", Language.CPP),
        ("util.cc", Language.CPP),
        ("thing.cxx", Language.CPP),
        ("header.h", Language.CPP),
        ("script.py", Language.PYTHON),
        ("notes.txt", Language.UNKNOWN),
        ("README", Language.UNKNOWN),
    ],
)
def test_detect_language(filename, expected):
    assert detect_language(filename) is expected


def test_detect_language_matches_substring():
    assert detect_language("page.html") is Language.CPP


def test_default_language_is_cpp():
    assert SyntaxHighlighter().language is Language.CPP


def test_set_language_from_filename():
    highlighter = SyntaxHighlighter()
    highlighter.set_language("tool.py")
    assert highlighter.language is Language.PYTHON


def test_tokenize_cpp_declaration():
    tokens = SyntaxHighlighter().tokenize_line("int x = 42;")
    assert [t.type for t in tokens] == [
        TokenType.TYPE,
        TokenType.NORMAL,
        TokenType.OPERATOR,
        TokenType.NUMBER,
        TokenType.OPERATOR,
    ]
    line = "int x = 42;"
    assert [line[t.start : t.start + t.length] for t in tokens] == ["int", "x", "=", "42", ";"]


def test_keywords_depend_on_language():
    highlighter = SyntaxHighlighter()
    assert highlighter.identify_token("return") is TokenType.KEYWORD
    assert highlighter.identify_token("def") is TokenType.NORMAL
    highlighter.set_language("a.py")
    assert highlighter.identify_token("def") is TokenType.KEYWORD
    assert highlighter.identify_token("int") is TokenType.NORMAL


def test_unknown_language_has_no_keywords():
    highlighter = SyntaxHighlighter()
    highlighter.set_language("notes.txt")
    assert highlighter.identify_token("if") is TokenType.NORMAL
    assert highlighter.identify_token("+") is TokenType.OPERATOR


def test_identify_token_edge_cases():
    highlighter = SyntaxHighlighter()
    assert highlighter.identify_token("") is TokenType.NORMAL
    assert highlighter.identify_token("include", True) is TokenType.PREPROCESSOR
    assert highlighter.identify_token("7", True) is TokenType.NUMBER
    assert highlighter.identify_token(".5") is TokenType.NUMBER
    assert highlighter.identify_token(".") is TokenType.OPERATOR
    assert highlighter.identify_token("#") is TokenType.NORMAL


def test_comment_runs_to_end_of_line():
    line = "x // note"
    tokens = SyntaxHighlighter().tokenize_line(line)
    comment = tokens[-1]
    assert comment.type is TokenType.COMMENT
    assert comment.start == line.index("//")
    assert comment.start + comment.length == len(line)
    assert tokens[0] == Token(TokenType.NORMAL, 0, 1)


def test_string_is_one_token():
    tokens = SyntaxHighlighter().tokenize_line('s = "a b"')
    assert [t.type for t in tokens] == [TokenType.NORMAL, TokenType.OPERATOR, TokenType.STRING]


def test_comment_marker_inside_string_is_not_comment():
    tokens = SyntaxHighlighter().tokenize_line('"a//b"')
    assert all(t.type is not TokenType.COMMENT for t in tokens)
    assert tokens[0].type is TokenType.STRING


def test_unterminated_string_is_trailing_token():
    line = "'abc"
    tokens = SyntaxHighlighter().tokenize_line(line)
    assert tokens == [Token(TokenType.NORMAL, 0, len(line))]


def test_empty_and_blank_lines_have_no_tokens():
    highlighter = SyntaxHighlighter()
    assert highlighter.tokenize_line("") == []
    assert highlighter.tokenize_line("   \t ") == []


def test_tokens_stay_within_line_and_in_order():
    line = "for (int i = 0; i < n; ++i) { total += values[i]; }"
    tokens = SyntaxHighlighter().tokenize_line(line)
    assert tokens
    previous_end = 0
    for token in tokens:
        assert token.start >= previous_end
        assert token.start + token.length <= len(line)
        previous_end = token.start + token.length


def test_color_pair_follows_declaration_order():
    highlighter = SyntaxHighlighter()
    for index, token_type in enumerate(TokenType):
        assert highlighter.color_pair(token_type) == index
from declang.helper import LexicalError, error_message, line_and_column


def test_error_message_points_at_location():
    assert error_message("x := @", 5, "invalid character") == (
        "x := @\n" "     ^ invalid character\n"
    )


def test_error_message_uses_offending_line():
    source = "x := 1\r\ny := 2 ?\nreturn y"
    location = source.index("?")
    assert error_message(source, location, "bad") == "y := 2 ?\n       ^ bad\n"


def test_line_and_column():
    assert line_and_column("ab\ncd", 0) == (1, 1)
    assert line_and_column("ab\ncd", 4) == (2, 2)


def test_lexical_error_without_source():
    error = LexicalError("invalid character '@'", "@", 0)
    assert error.line is None
    assert str(error) == "invalid character '@'"
    assert error.diagnostic() == "invalid character '@'\n"


def test_lexical_error_diagnostic():
    error = LexicalError("expected '=' after ':'", ":", 2, "x : 1")
    assert str(error) == "line 1 col 3: expected '=' after ':'"
    assert error.diagnostic() == "x : 1\n  ^ expected '=' after ':'\n"


def test_error_message_keeps_tabs_before_caret():
    assert error_message("\tx :=\t@", 6, "bad") == "\tx :=\t@\n\t    \t^ bad\n"

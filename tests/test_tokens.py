import pytest

from hort.tokens import Kind, Position, Token


def test_builtin_is_red():
    assert Token(Kind.BUILTIN, "list").colorized() == "\033[1;31mlist\033[0m"


def test_string_and_number_colours():
    assert Token(Kind.STRING, '"x"').colorized() == '\033[1;32m"x"\033[0m'
    assert Token(Kind.NUMBER, "42").colorized() == "\033[1;33m42\033[0m"


@pytest.mark.parametrize("kind", [Kind.SYMBOL, Kind.WHITESPACE])
def test_plain_kinds_unchanged(kind):
    assert Token(kind, "abc").colorized() == "abc"


@pytest.mark.parametrize("kind", [Kind.TRUE, Kind.FALSE])
def test_booleans_bold(kind):
    assert Token(kind, "v").colorized() == "\033[1mv\033[0m"


def test_colorized_keeps_braces():
    assert Token(Kind.SYMBOL, "{x}").colorized() == "{x}"


@pytest.mark.parametrize("kind", list(Kind))
def test_str_names_kind(kind):
    assert str(Token(kind, "v")) == f"{kind.value} = 'v'"


def test_position_equality():
    assert Position(1, 2) == Position(1, 2)
    assert Position(1, 2) != Position(2, 1)
    assert Token(Kind.SYMBOL, "a").position == Position(0, 0)
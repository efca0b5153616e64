import pytest

from hort import strings


@pytest.mark.parametrize(
    "text, both, left, right",
    [(" foo   ", "foo", "foo   ", " foo")],
)
def test_trim(text, both, left, right):
    assert strings.trim(text) == both
    assert strings.ltrim(text) == left
    assert strings.rtrim(text) == right


def test_trim_everything():
    assert strings.trim(" \t\n ") == ""
    assert strings.ltrim("xxaxx", "x") == "axx"
    assert strings.rtrim("xxaxx", "x") == "xxa"


def test_split_drops_empty_pieces():
    assert strings.split("a b  c") == ["a", "b", "c"]
    assert strings.split("  a  ") == ["a"]
    assert strings.split("a,b;c", ",;") == ["a", "b", "c"]


def test_split_edge_cases():
    assert strings.split("") == []
    assert strings.split("abc", "") == ["abc"]
    assert strings.split("   ") == []


def test_replace_every_occurrence():
    assert strings.replace("a/b/c", "/", "-") == "a-b-c"
    assert strings.replace("aaa", "a", "aa") == "aaaaaa"


def test_replace_empty_pattern_rejected():
    with pytest.raises(ValueError):
        strings.replace("abc", "", "x")


def test_case_mapping_ascii_only():
    assert strings.lower("HeLLo Ä") == "hello Ä"
    assert strings.upper("HeLLo ä") == "HELLO ä"


def test_title_after_spaces():
    assert strings.title("hello world") == "hello World"
    assert strings.title("a b c") == "a B C"


def test_join():
    assert strings.join("/", "foo", "bar", "baz") == "foo/bar/baz"
    assert strings.join("/", "foo") == "foo"


def test_join_needs_items():
    with pytest.raises(TypeError):
        strings.join("/")


def test_index_of_values():
    values = [1, 2, 3, 4, 5, 6, 7]
    for position, value in enumerate(values):
        assert strings.index_of(values, value) == position


def test_index_of_predicate():
    pairs = [(1, 1), (2, 2), (3, 3), (4, 4)]
    for position, pair in enumerate(pairs):
        assert strings.index_of(pairs, lambda item, p=pair: item[0] == p[0]) == position


def test_index_of_missing():
    assert strings.index_of([5, 6, 9, 7], 42) == -1
    assert strings.index_of([], 1) == -1
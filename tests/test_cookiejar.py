import pytest

from hort.cookiejar import CookieJar


@pytest.fixture
def jar(tmp_path):
    return CookieJar(tmp_path / "cookies.txt")


def test_get_missing_is_empty(jar):
    assert jar.get("sid") == ""
    assert "sid" not in jar


def test_set_and_get(jar):
    jar.set("sid", "abc")
    assert jar.get("sid") == "abc"


def test_set_empty_value_is_ignored(jar):
    jar.set("sid", "")
    assert "sid" not in jar
    assert len(jar) == 0


def test_serialize_sorted_and_skips_empty(jar):
    jar.set("b", "2")
    jar.set("a", "1")
    jar["empty"] = ""
    assert jar.serialize() == "a=1; b=2"


def test_getitem_inserts_empty_entry(jar):
    assert jar["new"] == ""
    assert "new" in jar
    assert jar.serialize() == ""


def test_erase_and_clear(jar):
    jar.set("a", "1")
    jar.set("b", "2")
    jar.erase("a")
    jar.erase("missing")
    assert list(jar) == ["b"]
    jar.clear()
    assert len(jar) == 0


def test_parse_netscape_lines(jar):
    jar.parse([
        ".example.com\tTRUE\t/\tFALSE\t0\tsid\tvalue1",
        "example.com\tFALSE\t/path\tTRUE\t1700000000\tpref\tx\ty",
    ])
    assert jar.get("sid") == "value1"
    assert jar.get("pref") == "x\ty"


def test_parse_malformed_line(jar):
    with pytest.raises(ValueError):
        jar.parse(["only\ttwo"])


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "cookies.txt"
    first = CookieJar(path)
    first.set("sid", "token")
    first.set("lang", "en")
    first.save()
    second = CookieJar(path)
    second.load()
    assert second.serialize() == first.serialize()
    assert list(second) == ["lang", "sid"]


def test_load_missing_file(jar):
    jar.load()
    assert len(jar) == 0


def test_load_line_without_tab(tmp_path):
    path = tmp_path / "cookies.txt"
    path.write_text("lonely\n", encoding="utf-8")
    jar = CookieJar(path)
    jar.load()
    assert jar.get("lonely") == "lonely"
import json
import logging

from hort.cookiejar import CookieJar
from hort.interface import Interface


class FakeSession:
    def __init__(self, cookie_path):
        self.cookies = CookieJar(cookie_path)


class FakeIndex:
    def __init__(self, docs=()):
        self.docs = list(docs)

    def query(self, filter=None):
        return list(self.docs)


class Recording(Interface):
    def __init__(self, *args, **kwargs):
        self.events = []
        super().__init__(*args, **kwargs)

    def auth(self):
        self.events.append("auth")

    def archive(self):
        self.events.append("archive")


def deps(tmp_path, name="demo", docs=()):
    hortpath = str(tmp_path / name) + "/"
    return {
        "hortpath": hortpath,
        "session": FakeSession(hortpath + "cookies.txt"),
        "index": FakeIndex(docs),
    }


def test_forward_passes_groups_to_callback(tmp_path):
    calls = []
    iface = Interface("demo", [(r"^item/(\w+)$", calls.append)], **deps(tmp_path))
    assert iface.forward("item/abc") is True
    assert calls == [["abc"]]


def test_forward_without_match_returns_false(tmp_path):
    calls = []
    iface = Interface("demo", [(r"^item/(\w+)$", calls.append)], **deps(tmp_path))
    assert iface.forward("other/abc") is False
    assert calls == []


def test_forward_uses_only_first_matching_rule(tmp_path):
    first, second = [], []
    iface = Interface(
        "demo", [(r"(\w+)", first.append), (r"(\w+)", second.append)], **deps(tmp_path)
    )
    assert iface.forward("word") is True
    assert first == [["word"]]
    assert second == []


def test_rules_keep_their_patterns(tmp_path):
    iface = Interface("demo", [(r"^a(\d)$", print), (r"^b(\d)$", print)], **deps(tmp_path))
    assert [rule.pattern for rule, _ in iface.rules] == [r"^a(\d)$", r"^b(\d)$"]


def test_missing_config_gives_empty_state(tmp_path):
    iface = Interface("demo", **deps(tmp_path))
    assert iface.state == {}


def test_state_round_trips_through_save(tmp_path):
    iface = Interface("demo", **deps(tmp_path))
    iface.state = {"key": "value", "items": ["x", "y"]}
    iface.save()
    assert (tmp_path / "demo" / "config.yml").exists()
    reloaded = Interface("demo", **deps(tmp_path))
    assert reloaded.state == {"key": "value", "items": ["x", "y"]}


def test_save_writes_cookies(tmp_path):
    iface = Interface("demo", **deps(tmp_path))
    iface.session.cookies.set("sid", "token")
    iface.save()
    jar = CookieJar(tmp_path / "demo" / "cookies.txt")
    jar.load()
    assert jar.get("sid") == "token"


def test_dump_is_indented_json_of_index(tmp_path):
    docs = [{"a": 1}, {"b": "two"}]
    iface = Interface("demo", **deps(tmp_path, docs=docs))
    text = iface.dump()
    assert json.loads(text) == docs
    assert "\n" in text


def test_run_archive_authenticates_first(tmp_path):
    iface = Recording("demo", **deps(tmp_path))
    Interface.run_archive(iface)
    assert iface.events == ["auth", "archive"]


def test_hortpath_gets_trailing_slash(tmp_path):
    iface = Interface(
        "demo",
        hortpath=str(tmp_path),
        session=FakeSession(str(tmp_path / "c.txt")),
        index=FakeIndex(),
    )
    assert iface.hortpath == str(tmp_path) + "/"


def test_forward_logs_match(tmp_path, caplog):
    iface = Interface("demo", [(r"^item/(\w+)$", lambda groups: None)], **deps(tmp_path))
    with caplog.at_level(logging.INFO, logger="hort.demo"):
        iface.forward("item/abc")
    assert "matched item/abc with interface demo" in caplog.text


def test_default_hooks_do_nothing(tmp_path):
    iface = Interface("demo", **deps(tmp_path))
    assert iface.subscribe("someone", ["tag"]) is None
    assert iface.state == {}
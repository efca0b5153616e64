# hort

A data hoarding and indexing framework. `hort` takes links to sites it
knows, downloads what they point to and keeps it on disk, as plain files or
zip archives. Each site has a document index kept in MongoDB.

Each site is handled by an *interface* (`hort.interface.Interface`): a set
of regular-expression rules, each mapping a link to a download action. The
first rule whose pattern is found in the input receives the captured groups.
Two interfaces come with the package:

- **Pastebin** (`hort.pastebin.Pastebin`): `pastebin.com/<id>` downloads a
  single paste; `pastebin.com/u/<user>` downloads every paste of a user,
  page by page, stopping on a page at the first paste already present.
- **Imgur** (`hort.imgur.Imgur`): `imgur.com/<id>` downloads an entire
  gallery into `<id>.zip`.

Each interface keeps its files in `~/.hort/<name>/`: downloads, a
`cookies.txt` for its HTTP session and a `config.yml` holding its state
(including subscriptions), which is written back when the command ends.

## Installing

```
pip install .
```

The index expects a MongoDB server on `localhost:27017` (database `hortdb`,
one collection `<name>_subscriptions` per interface).

## Command line

The package installs one command, `hortd`. Run without options it prints
the help text.

```
hortd --help
```

| Option | Meaning |
| --- | --- |
| `-h`, `--help` | Show help |
| `-v`, `--version` | Show version |
| `-i`, `--interactive` | Run in interactive mode |
| `-f`, `--forward URL` | Offer a link to every interface |
| `-d`, `--dump NAME` | Print an interface's index as JSON |
| `-a`, `--archive NAME` | Archive an interface |

Help, version and unrecognised options end the command with exit status 1.

To fetch a paste:

```
hortd --forward https://pastebin.com/2uDians0
```

In interactive mode, at the `(hort)` prompt:

- `list` shows the interfaces;
- the name of an interface enters it;
- anything else is offered to every interface;
- `quit` or `exit` (or end of input) leaves.

Inside an interface, `rules` shows its patterns, `archive` authenticates and
archives it, `quit` or `exit` goes back. A line that matches no rule is
recorded as a subscription, with tags asked for one per line until an empty
line. Archiving an interface forwards each of its subscriptions to its rules.

## Library

The building blocks can be used on their own:

```python
from hort import filesystem, patterns, strings
from hort.session import Session
from hort.archive import Archive

strings.trim(" foo   ")                    # "foo"
filesystem.base_name("/foo/bar/baz.foo")   # "baz.foo"
patterns.findall(r"(\d+)", "a1 b22 c333")  # ["1", "22", "333"]

with Session() as session:
    response = session.get("https://example.com/{}", "page")
    print(response.code, len(response.body))

with Archive("gallery.zip") as archive:
    archive.add("1.txt", b"hello")
```

Other modules:

- `hort.session`: `Session` with default browser headers, cookies persisted
  in a tab-separated file (`hort.cookiejar.CookieJar`) and retries (five
  attempts, five seconds apart by default); `download` saves a resource to
  disk. A request that fails every attempt returns a `Response` with code 0.
- `hort.response`: `Response` with `parse` (JSON), `feedparse` (XML) and
  `findall` (regular expression groups).
- `hort.formats`: `xml2json`, `yaml2json`, `loadxml`, `loadyaml`; malformed
  input raises `FormatError`.
- `hort.index`: `Index`, a MongoDB collection with `insert`, `query`,
  `update` and `update_field`.
- `hort.args`: `Args`, the small option parser behind `hortd`.
- `hort.worker`: `Worker`, a background task queue with a progress bar.
- `hort.term`: `Color`, `Style`, `Text` and `styled` for ANSI-coloured text;
  `render` and `echo` for printing values.
- `hort.tokens`: `Kind`, `Position` and `Token`, with coloured rendering.

New interfaces subclass `hort.interface.Interface`; the `hort.registry.register`
class decorator adds an instance to the registry used by `hortd`. When no
interface has been registered, `hortd` uses Imgur and Pastebin.

## What it does not do

- There is no interactive editor with syntax colouring: `hort.tokens` only
  describes tokens, and nothing splits input into them.
- Interfaces do not log in to the sites; `auth` only reloads stored cookies.
- Nothing is written to the index by the built-in interfaces; `--dump`
  shows whatever has been inserted into it by other code.

## Tests

```
pip install .[test]
pytest
```
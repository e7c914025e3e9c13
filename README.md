# proptree

A property tree is an ordered tree of nodes. Each node holds a string value
and any number of named children. More than one child may have the same
name. `proptree` reads such trees from JSON and XML and writes them in the
INFO format. You can get and set values with dotted paths such as
`"debug.level"`.

The package has no dependencies beyond the standard library.

## Installation

```
pip install proptree
```

To run the test suite:

```
pip install "proptree[test]"
pytest
```

## Working with trees

```python
from proptree.tree import PropertyTree

tree = PropertyTree()
tree.put("debug.filename", "debug.log")
tree.put("debug.level", 2)
tree.add("debug.modules.module", "Finance")
tree.add("debug.modules.module", "Admin")

tree.get("debug.filename")          # "debug.log"
tree.get("debug.level", 0)          # 2, converted to the type of the default
tree.get("debug.missing", "none")   # "none"

for name, child in tree.get_child("debug.modules"):
    print(name, child.get_value())
```

Each node stores its value as a string in `data`.

- `put_value` stores a value on the node itself. Booleans are stored as
  `"true"` or `"false"`. Any other value is stored as its `str()`.
- `put(path, value)` sets the value at a path and creates missing nodes. If
  a node with a key already exists, it is reused.
- `add(path, value)` always appends a new node for the last key of the path.
  Repeated calls therefore build lists of siblings.
- `push_back(key, child)` appends a child node and returns it.

There are several ways to read from a tree:

- `get(path)` returns the data string at the path. It raises `PtreeBadPath`
  if the path does not resolve.
- `get(path, default)` converts the data to the type of the default. It
  returns the default if the node is missing or the conversion fails.
- `get_value(default)` does the same for the node itself.
- `get_child(path)` returns a node and raises `PtreeBadPath` if the path
  does not resolve. `find_child(path)` returns `None` in that case.

Iterating over a tree yields `(key, child)` pairs in order, and `len()`
counts the direct children. Two trees compare equal when their data and
their children, in order, are equal.

Paths are `StringPath` objects, or plain strings that are parsed with `.` as
the separator. Paths can be joined with `/`:

```python
from proptree.path import StringPath

path = StringPath("debug") / "modules"
path.reduce()   # "debug"
path.reduce()   # "modules"
path.is_empty() # True
```

## Reading JSON

```python
from proptree.json_reader import parse_json, read_json

tree = parse_json('{"a": [1, 2, {"b": "c"}], "f": null}')
tree.get("f")                 # "null"

tree = read_json("settings.json")
with open("settings.json") as handle:
    tree = read_json(handle)
```

`parse_json` accepts a `str` or UTF-8 `bytes`. `read_json` accepts a file
path or an open text or binary stream.

Every scalar is stored as its literal text, so numbers, `true`, `false` and
`null` keep exactly the form they had in the input. String escapes, including
`\uXXXX` and surrogate pairs, are decoded. Array items become children with
empty names.

Syntax errors raise `JsonParserError`, which carries the file name and the
line. `JsonParser(text, filename).parse()` is the parser behind these
functions.

## Reading XML

```python
from proptree.xml_reader import parse_xml, read_xml
from proptree.xml_utils import XmlFlags

tree = parse_xml('<start a="x">text</start>', XmlFlags.TRIM_WHITESPACE)
tree.get("start.<xmlattr>.a")   # "x"
tree.get("start")               # "text"
```

Elements become children keyed by their names. The rest of the document is
mapped as follows:

- Attributes are stored under a child named `<xmlattr>`.
- Comments are stored under children named `<xmlcomment>`.
- Text and CDATA are appended to the element's data. With
  `XmlFlags.NO_CONCAT_TEXT`, each piece of text goes into its own
  `<xmltext>` child instead.
- `XmlFlags.NO_COMMENTS` drops comments.
- `XmlFlags.TRIM_WHITESPACE` collapses runs of whitespace in text and trims
  them.
- The predefined entities and numeric character references are decoded.
- XML declarations, processing instructions and DOCTYPE declarations are
  skipped.
- A UTF-8 byte order mark at the start is ignored.

Malformed documents raise `XmlParserError` with the line of the error.
Unknown flag bits raise `ValueError`.

`proptree.xml_utils` also provides some helpers:

- `validate_flags` checks flag bits.
- `condense` collapses whitespace.
- `encode_char_entities` and `decode_char_entities` handle the five
  predefined entities.
- The constants `XMLATTR`, `XMLCOMMENT`, `XMLTEXT` and `XMLDECL` hold the
  special key names.

## Writing INFO

```python
from proptree.info_writer import InfoWriterSettings, format_info, write_info

print(format_info(tree, InfoWriterSettings(indent_char=" ", indent_count=4)))
write_info("out.info", tree)
with open("out.info", "w") as handle:
    write_info(handle, tree, InfoWriterSettings())
```

The data of the root node itself is not written. Keys and values are quoted
when they are empty or contain spaces, tabs, braces, semicolons, quotes or
newlines. `create_escapes` escapes control characters, quotes and
backslashes. `is_simple_key` and `is_simple_data` report whether quoting is
needed. Failures to open or write raise `InfoParserError`.

## Errors

Every error derives from `proptree.errors.PtreeError`, which is a
`RuntimeError`.

- `PtreeBadPath` carries the failing `path`.
- `PtreeBadData` carries the offending `data`.
- `FileParserError` is the parent of `JsonParserError`, `XmlParserError` and
  `InfoParserError`. It carries `message`, `filename` and `line`. Its text
  has the form `file(line): message`.

## What is not included

- JSON can be read but not written.
- INFO can be written but not read.
- XML can be read but not written. `XmlWriterSettings` and
  `xml_writer_make_settings` only hold indentation and encoding settings;
  nothing in the package consumes them.
- There is no command-line tool.
# rawxml

`rawxml` is a small, forgiving XML reader. It does not build a tree.
One pass over the input fills a flat table whose keys are
slash-separated element paths such as `book/content/maintext`. You then
ask for the n-th tag name or the n-th piece of text recorded under a path.

## Installation

```
pip install .
```

## Using the parser

```python
from rawxml.parser import Parser

parser = Parser()
parser.parse(
    "<book>"
    "<content page_number=\"12\" text=\"hello\">"
    "<maintext>hello2</maintext>"
    "</content>"
    "<author>oscar wilde</author>"
    "</book>"
)

parser.get_tag("book", 0)                          # "content"
parser.get_tag("book", 1)                          # "author"
parser.get_content("book/content/maintext", 0)     # "hello2"
parser.get_content("book/author", 0)               # "oscar wilde"

# Attributes: their names are tags under the element's path,
# their values are content under the attribute's own path.
parser.get_tag("book/content", 0)                  # "page_number"
parser.get_tag("book/content", 1)                  # "text"
parser.get_tag("book/content", 2)                  # "maintext"
parser.get_content("book/content/page_number", 0)  # "12"
parser.get_content("book/content/text", 0)         # "hello"
```

- `Parser.parse(xml_input)` adds the entries of a document to the parser's
  table. Calling it again adds to what is already there.
- `Parser.get_tag(parent_tag, index=0)` returns the `index`-th child tag or
  attribute name recorded under `parent_tag`. With an empty `parent_tag` it
  returns the `index`-th table key that contains no slash, i.e. a top-level
  path, in the table's slot order.
- `Parser.get_content(parent_tag, index=0)` returns the `index`-th piece of
  text or attribute value recorded under `parent_tag`.

Both lookups return an empty string when there is no such entry, and raise
`ValueError` for a negative `index`. The table itself is available as
`Parser.table`; each path maps to a list of `(EntryKind, str)` pairs, where
`EntryKind.TAG` marks tag and attribute names and `EntryKind.CONTENT` marks
text and attribute values.

Text is kept exactly as it appears between tags, whitespace included, and
quotation marks are dropped from attribute values.

## The table

The parser stores its entries in a `rawxml.table.HashTable`: a
fixed-capacity, open-addressing table with linear probing and string keys
(16384 slots by default). It behaves like a small mapping:

```python
from rawxml.table import HashTable, TableFullError, string_hash

table = HashTable(16)
table["as"] = "1"
"as" in table                   # True
len(table)                      # 1
table.setdefault("b", [])       # []
for key, value in table.items():
    print(key, value)
```

Iteration follows slot order, not insertion order. Keys must be non-empty
strings: a non-string key raises `TypeError`, an empty one `ValueError`, and a
missing key `KeyError`. Adding a key when no slot is free raises
`TableFullError`. `string_hash(text)` is the 64-bit hash the table uses.

## Command line

```
rawxml
```

With no arguments this parses a built-in sample document and prints the
first tag under `book` (`content`) and the text of `book/content/maintext`
(`hello2`).

```
rawxml [FILE] [--tag PATH] [--content PATH] [--index N]
```

- `FILE` – XML file to read, or `-` for standard input.
- `--tag` – path whose tag is printed (default `book`).
- `--content` – path whose content is printed (default `book/content/maintext`).
- `--index` – entry index used for both lookups (default `0`).

The command exits with status 1 if the file cannot be read or the index is
negative.

## What it does not do

`rawxml` does not check that a document is well-formed, does not decode
entities or character references, and has no special handling for comments,
processing instructions, CDATA sections, namespaces or self-closing tags. It
reads documents only; it cannot write or modify XML.
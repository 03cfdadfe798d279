"""A minimal XML scanner that stores tags, attributes and content by path."""

from __future__ import annotations

from enum import Enum
from itertools import islice

from rawxml.table import HashTable

_WHITESPACE = frozenset(" \n\t\r")


class EntryKind(Enum):
    TAG = "t"
    CONTENT = "c"


class Parser:
    """Scans XML text into a table keyed by slash-separated element paths.

    Each path maps to an ordered list of entries: child tag names and attribute
    names are TAG entries, text and attribute values are CONTENT entries.
    """

    def __init__(self) -> None:
        self.table = HashTable()

    def _append(self, key: str, kind: EntryKind, value: str) -> None:
        self.table.setdefault(key, []).append((kind, value))

    def parse(self, xml_input: str) -> None:
        """Add the contents of ``xml_input`` to the table."""
        in_tag = False
        closing = False
        parent = ""
        name = ""
        in_attr_name = False
        in_attr_value = False
        attr_name = ""
        attr_value = ""

        for char in xml_input:
            if char in _WHITESPACE:
                if not in_tag:
                    name += char
                    continue
                if in_attr_value:
                    self._append(f"{parent}/{name}/{attr_name}", EntryKind.CONTENT, attr_value)
                    attr_name = attr_value = ""
                in_attr_name = True
                in_attr_value = False
            elif char == "<":
                if parent and name:
                    kind = EntryKind.TAG if in_tag else EntryKind.CONTENT
                    self._append(parent, kind, name)
                in_tag = True
                in_attr_name = in_attr_value = False
                closing = False
                name = ""
            elif char == ">":
                if not closing:
                    if in_attr_value:
                        self._append(f"{parent}/{name}/{attr_name}", EntryKind.CONTENT, attr_value)
                        attr_name = attr_value = ""
                    if parent and name:
                        self._append(parent, EntryKind.TAG, name)
                    parent = f"{parent}/{name}" if parent else name
                else:
                    parent = parent.rpartition("/")[0]
                in_tag = False
                in_attr_name = in_attr_value = False
                closing = False
                name = ""
            elif char == "/":
                in_tag = True
                in_attr_name = in_attr_value = False
                closing = True
                name = ""
            elif char == "=":
                self._append(f"{parent}/{name}", EntryKind.TAG, attr_name)
                in_attr_name = False
                in_attr_value = True
            else:
                if not in_attr_name and not in_attr_value:
                    name += char
                if char == '"':
                    continue
                if in_attr_name:
                    attr_name += char
                elif in_attr_value:
                    attr_value += char

    def _nth(self, parent_tag: str, index: int, kind: EntryKind) -> str:
        if parent_tag not in self.table:
            return ""
        values = (value for entry_kind, value in self.table[parent_tag] if entry_kind is kind)
        return next(islice(values, index, None), "")

    def get_tag(self, parent_tag: str, index: int = 0) -> str:
        """Return the ``index``-th tag or attribute name under ``parent_tag``.

        With an empty ``parent_tag`` the ``index``-th top-level path is returned.
        An empty string means there is no such entry.
        """
        if index < 0:
            raise ValueError("index must not be negative")
        if not parent_tag:
            top_level = (key for key in self.table if "/" not in key)
            return next(islice(top_level, index, None), "")
        return self._nth(parent_tag, index, EntryKind.TAG)

    def get_content(self, parent_tag: str, index: int = 0) -> str:
        """Return the ``index``-th text or attribute value under ``parent_tag``."""
        if index < 0:
            raise ValueError("index must not be negative")
        return self._nth(parent_tag, index, EntryKind.CONTENT)
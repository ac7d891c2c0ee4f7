"""Locating the data table inside a parsed document."""

from __future__ import annotations

from typing import Iterator, Optional

from bs4 import Tag


def _walk(node: Tag) -> Iterator[Tag]:
    """Yield element nodes depth-first in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        children = [child for child in current.children if isinstance(child, Tag)]
        stack.extend(reversed(children))


def find_table(document: Tag) -> Optional[Tag]:
    for node in _walk(document):
        if node.name == "table":
            return node
    return None


def locate_table_rows(document: Tag) -> Optional[Tag]:
    """Return the node holding the first table's ``tr`` rows, if any table exists.

    Parsers that insert an implicit ``tbody`` put the rows there; otherwise
    the rows are direct children of the table element.
    """
    table = find_table(document)
    if table is None:
        return None
    body = table.find("tbody", recursive=False)
    return body if body is not None else table


def iter_table_rows(container: Tag) -> Iterator[Tag]:
    for child in container.children:
        if isinstance(child, Tag) and child.name == "tr":
            yield child

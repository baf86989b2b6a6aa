"""Line classification into typed blocks and grouping into render units"""

import re
from typing import Iterable, Union

from briefmail.core.models import Block, BlockKind, GroupedBlock, GroupKind


HEADING_RE   = re.compile(r'^(#{1,6})\s+(.+?)(?:\s+#+)?\s*$')
RULE_RE      = re.compile(r'^\s*-{3,}\s*$')
LIST_RE      = re.compile(r'^([ \t]*)-\s+(.*\S)\s*$')
EMPTY_ITEM_RE = re.compile(r'^[ \t]*-[ \t]*$')   # marker with no text
SEPARATOR_RE = re.compile(r'^:?-+:?$')

MAX_HEADING_LEVEL = 3
NESTED_INDENT = 2       # leading columns that make a list item depth 1

GROUP_KIND: dict[BlockKind, GroupKind] = {
    BlockKind.heading:   GroupKind.heading,
    BlockKind.rule:      GroupKind.rule,
    BlockKind.table_row: GroupKind.table,
    BlockKind.list_item: GroupKind.list,
    BlockKind.paragraph: GroupKind.paragraph,
    BlockKind.blank:     GroupKind.blank,
}

# Kinds whose consecutive blocks merge into one group; headings and rules stand alone.
_RUN_KINDS = {BlockKind.table_row, BlockKind.list_item, BlockKind.paragraph, BlockKind.blank}


def _split_lines(document: Union[str, Iterable[str]]) -> list[str]:
    if isinstance(document, str):
        return document.splitlines()
    return [line.rstrip('\r\n') for line in document]


def _table_cells(stripped: str) -> list[str] | None:
    """Return cell texts for a pipe-delimited row, else None."""
    if len(stripped) < 3 or stripped[0] != '|' or stripped[-1] != '|':
        return None
    inner = stripped[1:-1]
    if '|' not in inner:
        return None
    return [cell.strip() for cell in inner.split('|')]


def classify_line(line: str, number: int) -> Block:
    """Classify a single line; unrecognized content is a paragraph line."""
    if m := HEADING_RE.match(line):
        level = min(len(m.group(1)), MAX_HEADING_LEVEL)
        return Block(kind=BlockKind.heading, line=number, text=m.group(2), level=level)

    if RULE_RE.match(line):
        return Block(kind=BlockKind.rule, line=number)

    if EMPTY_ITEM_RE.match(line):
        return Block(kind=BlockKind.blank, line=number)

    stripped = line.strip()
    cells = _table_cells(stripped)
    if cells is not None:
        separator = all(SEPARATOR_RE.match(c) for c in cells)
        return Block(kind=BlockKind.table_row, line=number, cells=cells, separator=separator)

    if m := LIST_RE.match(line):
        indent = len(m.group(1).expandtabs(4))
        depth = 1 if indent >= NESTED_INDENT else 0
        return Block(kind=BlockKind.list_item, line=number, text=m.group(2), depth=depth)

    if not stripped:
        return Block(kind=BlockKind.blank, line=number)

    return Block(kind=BlockKind.paragraph, line=number, text=stripped)


def classify(document: Union[str, Iterable[str]]) -> list[Block]:
    """Classify every line of document, in order. Line numbers are 1-based."""
    return [classify_line(line, i) for i, line in enumerate(_split_lines(document), start=1)]


def group_blocks(blocks: list[Block]) -> list[GroupedBlock]:
    """Merge maximal runs of tables, lists, paragraphs and blanks into groups."""
    groups: list[GroupedBlock] = []

    for block in blocks:
        kind = GROUP_KIND[block.kind]
        if groups and block.kind in _RUN_KINDS and groups[-1].kind == kind:
            groups[-1].blocks.append(block)
        else:
            groups.append(GroupedBlock(kind=kind, blocks=[block]))

    return groups

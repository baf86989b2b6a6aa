"""Grouped-block rendering: headings, rules, tables, lists, paragraphs"""

from typing import Callable

from briefmail.core.models import Block, GroupedBlock, GroupKind
from briefmail.core.render import styles
from briefmail.core.render.inline import render_inline, severity_of, severity_pill


def _clamp_level(level: int | None) -> int:
    return min(max(level or 1, 1), 3)


def render_heading(group: GroupedBlock) -> str:
    block = group.blocks[0]
    level = _clamp_level(block.level)
    return f'<h{level} style="{styles.HEADING_STYLES[level]}">{render_inline(block.text)}</h{level}>'


def render_rule(group: GroupedBlock) -> str:
    return styles.RULE


def _cell(text: str, tag: str, style: str) -> str:
    severity = severity_of(text) if tag == "td" else None
    content = severity_pill(severity) if severity else render_inline(text)
    return f'<{tag} style="{style}">{content}</{tag}>'


def _pad(cells: list[str], width: int) -> list[str]:
    return cells + [""] * (width - len(cells))


def render_table(group: GroupedBlock) -> str:
    """Render a run of table rows: first non-separator row is the header, the rest body.

    Separator rows are dropped wherever they appear. Short rows are padded with
    empty cells up to the widest row. Body rows alternate shading.
    """
    rows = [b.cells for b in group.blocks if not b.separator]
    if not rows:
        return ""
    width = max(len(r) for r in rows)
    header, body = rows[0], rows[1:]

    head_cells = "".join(_cell(c, "th", styles.HEADER_CELL) for c in _pad(header, width))
    parts = [
        f'<table style="{styles.TABLE}" cellpadding="0" cellspacing="0">',
        f'<thead><tr style="{styles.HEADER_ROW}">{head_cells}</tr></thead>',
    ]
    if body:
        parts.append("<tbody>")
        for i, row in enumerate(body):
            shade = styles.ROW_SHADES[i % 2]
            cells = "".join(_cell(c, "td", styles.BODY_CELL) for c in _pad(row, width))
            parts.append(f'<tr style="background:{shade};">{cells}</tr>')
        parts.append("</tbody>")
    parts.append("</table>")
    return "\n".join(parts)


def _sub_list(items: list[Block]) -> str:
    entries = "".join(
        f'<li style="{styles.SUB_ITEM}">{render_inline(b.text)}</li>' for b in items
    )
    return f'<ul style="{styles.SUB_LIST}">{entries}</ul>'


def render_list(group: GroupedBlock) -> str:
    """Render list items with one level of nesting.

    A run of depth-1 items nests under the preceding depth-0 item; a run with
    no preceding depth-0 item gets its own unmarked top-level entry.
    """
    entries: list[tuple[Block | None, list[Block]]] = []
    for block in group.blocks:
        if block.depth == 0:
            entries.append((block, []))
        elif entries:
            entries[-1][1].append(block)
        else:
            entries.append((None, [block]))

    out = []
    for parent, children in entries:
        nested = _sub_list(children) if children else ""
        if parent is None:
            out.append(f'<li style="{styles.ORPHAN_ITEM}">{nested}</li>')
        else:
            out.append(f'<li style="{styles.ITEM}">{render_inline(parent.text)}{nested}</li>')
    return f'<ul style="{styles.LIST}">\n' + "\n".join(out) + "\n</ul>"


def render_paragraph(group: GroupedBlock) -> str:
    """Render a run of paragraph lines as one <p>; a run rendering to nothing is dropped."""
    lines = [html for html in (render_inline(b.text).strip() for b in group.blocks) if html]
    if not lines:
        return ""
    return "<p>" + "<br/>\n".join(lines) + "</p>"


def render_blank(group: GroupedBlock) -> str:
    return ""


RENDERERS: dict[GroupKind, Callable[[GroupedBlock], str]] = {
    GroupKind.heading:   render_heading,
    GroupKind.rule:      render_rule,
    GroupKind.table:     render_table,
    GroupKind.list:      render_list,
    GroupKind.paragraph: render_paragraph,
    GroupKind.blank:     render_blank,
}


def render_group(group: GroupedBlock) -> str:
    return RENDERERS[group.kind](group)

"""Document assembly: classify, group, render each unit, concatenate"""

from typing import Iterable, Union

from briefmail.core.render.blocks import render_group
from briefmail.core.render.classify import classify, group_blocks


def render(document: Union[str, Iterable[str]]) -> str:
    """Render a markdown-subset document (text or lines) to an HTML fragment.

    Pure and total: empty input yields an empty string and nothing raises.
    Zero-length units (blank runs, empty paragraphs) are dropped.
    """
    groups = group_blocks(classify(document))
    return "\n".join(html for html in (render_group(g) for g in groups) if html)

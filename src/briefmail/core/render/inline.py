"""Inline span rendering: bold-italic, severity badges, links, bold, italic

Each pass replaces its matches with an opaque placeholder that points at a
finished markup fragment, so later passes never see (or re-match) markup an
earlier pass produced. The inner text of bold and bold-italic spans goes
through the passes that follow their own, so emphasis and links nest inside
them. Plain text is HTML-escaped once, when the fragment that contains it is
built or, for text outside any span, at the very end.
"""

import re
from typing import Callable, Optional

from markdown_it.common.normalize_url import normalizeLink
from markdown_it.common.utils import escapeHtml

from briefmail.core.models import Severity
from briefmail.core.render import styles


_OPEN, _CLOSE = "\ue000", "\ue001"  # private-use delimiters around fragment indexes
PLACEHOLDER_RE = re.compile(f"{_OPEN}(\\d+){_CLOSE}")

Inner = Callable[[str], str]
Builder = Callable[[re.Match, Inner], str]

LABEL = r"(?P<label>[^\s*:\[\]][^*:\[\]\n]{0,39}?)"
SEVERITY = r"(?P<severity>(?i:high|medium|low))"

BOLD_ITALIC_RE = re.compile(r"\*\*\*(?=\S)(.+?)(?<=\S)\*\*\*")
BADGE_RES = (
    re.compile(rf"\*{LABEL}:\*\s*\*\*{SEVERITY}\*\*"),            # *Label:* **High**
    re.compile(rf"\*\*{LABEL}:\s*{SEVERITY}\*\*"),                # **Label: High**
    re.compile(rf"\*\*{LABEL}:\*\*\s*{SEVERITY}\b(?![-'\w]|\s*\w)"), # **Label:** High
)
LINK_RE   = re.compile(r"\[([^\]\n]+)\]\((https?://[^)\s]+)\)")
BOLD_RE   = re.compile(r"\*\*(?=\S)(.+?)(?<=\S)\*\*")
ITALIC_RE = re.compile(r"(?<!\*)\*(?=[^\s*])([^*\n]+?)(?<=[^\s*])\*(?!\*)")


class _Fragments:
    """Finished markup fragments referenced from the working text by placeholder."""

    def __init__(self):
        self.parts: list[str] = []

    def stash(self, markup: str) -> str:
        self.parts.append(markup)
        return f"{_OPEN}{len(self.parts) - 1}{_CLOSE}"

    def restore(self, text: str) -> str:
        return PLACEHOLDER_RE.sub(lambda m: self.restore(self.parts[int(m.group(1))]), text)


def severity_of(text: str) -> Optional[Severity]:
    """Return the severity tier named by text (ignoring case and emphasis markers), else None."""
    word = text.strip().strip("*_").strip().lower()
    try:
        return Severity(word)
    except ValueError:
        return None


def severity_pill(severity: Severity) -> str:
    return f'<span style="{styles.pill_style(severity)}">{severity.value.upper()}</span>'


def _badge(m: re.Match, inner: Inner) -> str:
    severity = Severity(m.group("severity").lower())
    icon, _ = styles.SEVERITY_TIERS[severity]
    label = escapeHtml(m.group("label").strip())
    return (
        f'<span style="{styles.BADGE}">{icon} <strong>{label}:</strong> '
        f'{severity_pill(severity)}</span>'
    )


def _link(m: re.Match, inner: Inner) -> str:
    href = escapeHtml(normalizeLink(m.group(2)))
    label = escapeHtml(m.group(1))
    return f'<a href="{href}" style="{styles.LINK}" target="_blank">{label}</a>'


def _bold_italic(m: re.Match, inner: Inner) -> str:
    return f"<strong><em>{inner(m.group(1))}</em></strong>"


def _bold(m: re.Match, inner: Inner) -> str:
    return f'<strong style="{styles.STRONG}">{inner(m.group(1))}</strong>'


def _italic(m: re.Match, inner: Inner) -> str:
    return f'<em style="{styles.EM}">{escapeHtml(m.group(1))}</em>'


# Order matters: badges before bold, links before bold/italic.
PASSES: tuple[tuple[re.Pattern, Builder], ...] = (
    (BOLD_ITALIC_RE, _bold_italic),
    *((pattern, _badge) for pattern in BADGE_RES),
    (LINK_RE, _link),
    (BOLD_RE, _bold),
    (ITALIC_RE, _italic),
)


def _apply(text: str, passes: tuple, fragments: _Fragments) -> str:
    """Run passes over text; a span's inner text goes through the passes after its own."""
    for i, (pattern, build) in enumerate(passes):
        rest = passes[i + 1:]

        def inner(s: str, rest=rest) -> str:
            return escapeHtml(_apply(s, rest, fragments))

        text = pattern.sub(lambda m, build=build, inner=inner: fragments.stash(build(m, inner)), text)
    return text


def render_inline(text: str) -> str:
    """Render the inline spans of one line of text to HTML. Never raises."""
    fragments = _Fragments()
    work = text.replace(_OPEN, "").replace(_CLOSE, "")
    return fragments.restore(escapeHtml(_apply(work, PASSES, fragments)))

"""Unit tests for core/chrome.py"""

from briefmail.config import Settings
from briefmail.core.chrome import render_email


def test_render_email_wraps_body(today):
    """The body fragment is embedded verbatim in a complete HTML document."""
    body = '<p>Hello <strong style="x">world</strong></p>'
    out = render_email(body, today, Settings())
    assert out.startswith("<!DOCTYPE html>")
    assert out.rstrip().endswith("</html>")
    assert body in out


def test_render_email_masthead(today):
    """Masthead and footer carry the newsletter name, long date and audience."""
    out = render_email("", today, Settings(newsletter_name="GridIQ", audience="Acme Power"))
    assert "<title>GridIQ &mdash; Monday, October 19, 2026</title>" in out
    assert out.count("GridIQ") >= 3
    assert "Prepared exclusively for Acme Power" in out
    assert out.count("Monday, October 19, 2026") >= 3


def test_render_email_escapes_settings(today):
    """Configured names are HTML-escaped; the body is not."""
    out = render_email("<p>a&amp;b</p>", today, Settings(audience="R&D <Team>"))
    assert "Prepared exclusively for R&amp;D &lt;Team&gt;" in out
    assert "<p>a&amp;b</p>" in out

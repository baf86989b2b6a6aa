"""Inline style hooks for rendered markup (heading tiers, severity tiers, tables)"""

from briefmail.core.models import Severity


SANS  = "'Helvetica Neue',Arial,sans-serif"
SERIF = "Georgia,serif"
DISPLAY = "'Playfair Display',Georgia,serif"
ACCENT = "#c8401a"
INK    = "#0f0f0f"

HEADING_STYLES: dict[int, str] = {
    1: f"font-family:{DISPLAY};font-size:30px;font-weight:900;color:{INK};"
       "margin:0 0 4px;line-height:1.15;letter-spacing:-0.5px;",
    2: f"font-family:{SANS};font-size:9px;font-weight:700;letter-spacing:0.35em;"
       f"text-transform:uppercase;color:{ACCENT};border-top:2px solid {INK};"
       "padding-top:8px;margin:28px 0 12px;",
    3: f"font-family:{DISPLAY};font-size:14px;font-weight:700;color:{INK};margin:14px 0 5px;",
}

RULE = '<hr style="border:none;border-top:1px solid #d4c9b0;margin:16px 0;"/>'

LINK   = f"color:{ACCENT};font-family:{SERIF};text-decoration:none;border-bottom:1px solid rgba(200,64,26,0.35);"
STRONG = f"font-family:{SERIF};color:{INK};"
EM     = "color:#4b5563;"

LIST     = "margin:8px 0 14px 16px;padding:0;"
SUB_LIST = "margin:4px 0 8px 0;padding:0;list-style:none;"
ITEM     = "margin-bottom:8px;padding-left:2px;"
SUB_ITEM = (f"font-family:{SANS};font-size:12px;line-height:1.65;color:#4b5563;"
            "margin:5px 0;list-style:none;border-left:2px solid #e5e7eb;padding-left:10px;")
ORPHAN_ITEM = "list-style:none;"

TABLE     = "width:100%;border-collapse:collapse;margin:12px 0 18px;"
HEADER_ROW  = f"background:{INK};"
HEADER_CELL = (f"font-family:{SANS};font-size:10px;font-weight:700;letter-spacing:0.08em;"
               "text-transform:uppercase;color:#ffffff;text-align:left;padding:7px 10px;")
BODY_CELL   = f"font-family:{SERIF};font-size:13px;color:#1a1a1a;padding:7px 10px;border-bottom:1px solid #e5dccb;"
ROW_SHADES  = ("#f5f0e8", "#ece5d6")  # even, odd body rows

# icon, pill background
SEVERITY_TIERS: dict[Severity, tuple[str, str]] = {
    Severity.high:   ("⬆", "#166534"),
    Severity.medium: ("◆", "#92400e"),
    Severity.low:    ("▸", "#374151"),
}

BADGE = f"font-family:{SANS};font-size:10px;font-style:normal;"
PILL  = ("color:#fff;padding:1px 7px;border-radius:2px;font-size:10px;"
         "font-weight:600;letter-spacing:0.04em;background:{background};")


def pill_style(severity: Severity) -> str:
    """Return the pill style for a severity tier."""
    return PILL.format(background=SEVERITY_TIERS[severity][1])

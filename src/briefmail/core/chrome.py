"""Newsletter chrome: the full HTML document a rendered briefing is embedded into"""

from datetime import date
from html import escape

from briefmail.config import Settings
from briefmail.core.render.styles import ACCENT, INK, SANS, SERIF
from briefmail.core.utils.dates import long_date


# Typography defaults for the unstyled structural markup the renderer emits.
BASE_CSS = f"""\
    p  {{ font-family:{SERIF}; font-size:14px; line-height:1.75; color:#1a1a1a; margin:0 0 10px; }}
    ul {{ margin:8px 0 14px 16px; padding:0; }}
    li {{ font-family:{SERIF}; font-size:14px; line-height:1.75; color:#1a1a1a; }}
    a  {{ color:{ACCENT}; }}"""


EMAIL_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8"/>
  <meta name="viewport" content="width=device-width,initial-scale=1.0"/>
  <title>{title}</title>
  <link href="https://fonts.googleapis.com/css2?family=Playfair+Display:wght@400;700;900&display=swap" rel="stylesheet"/>
  <style>
{css}
  </style>
</head>
<body style="margin:0;padding:0;background:#ede8dc;font-family:{serif};">

<table width="100%" cellpadding="0" cellspacing="0" style="background:#ede8dc;padding:28px 0;">
<tr><td align="center">
<table width="680" cellpadding="0" cellspacing="0" style="max-width:680px;width:100%;background:#f5f0e8;border:1px solid #c9bfaa;">

  <!-- TOP RULE -->
  <tr><td style="padding:0 44px;">
    <table width="100%" cellpadding="0" cellspacing="0"><tr><td style="height:4px;background:{ink};"></td></tr></table>
  </td></tr>

  <!-- MASTHEAD -->
  <tr><td style="padding:28px 44px 22px;text-align:center;border-bottom:3px double {ink};">
    <p style="margin:0 0 8px;font-family:{sans};font-size:9px;font-weight:700;letter-spacing:0.4em;text-transform:uppercase;color:{accent};">
      Daily Intelligence Briefing &nbsp;&middot;&nbsp; Data Center Market Monitor
    </p>
    <h1 style="margin:0;font-family:'Playfair Display',Georgia,serif;font-size:48px;font-weight:900;line-height:1;letter-spacing:-1.5px;color:{ink};">
      {name}
    </h1>
    <p style="margin:10px 0 0;font-family:{sans};font-size:9px;letter-spacing:0.25em;color:#6b7280;text-transform:uppercase;">
      {date_str}
    </p>
    <table width="100%" cellpadding="0" cellspacing="0" style="margin-top:14px;"><tr>
      <td style="border-top:1px solid #c9bfaa;"></td>
      <td style="padding:0 12px;white-space:nowrap;">
        <span style="font-family:{sans};font-size:8px;letter-spacing:0.3em;text-transform:uppercase;color:#9ca3af;">
          Prepared exclusively for {audience}
        </span>
      </td>
      <td style="border-top:1px solid #c9bfaa;"></td>
    </tr></table>
  </td></tr>

  <!-- BODY -->
  <tr><td style="padding:30px 44px 36px;">
{body}
  </td></tr>

  <!-- FOOTER -->
  <tr><td style="padding:16px 44px 20px;border-top:3px double {ink};text-align:center;">
    <p style="margin:0 0 4px;font-family:{sans};font-size:8px;letter-spacing:0.25em;text-transform:uppercase;color:#9ca3af;">
      {name} &nbsp;&middot;&nbsp; Automated via live web search
    </p>
    <p style="margin:0;font-family:{sans};font-size:8px;letter-spacing:0.2em;text-transform:uppercase;color:#c9bfaa;">
      For internal use only &nbsp;&middot;&nbsp; {date_str}
    </p>
  </td></tr>

  <!-- BOTTOM RULE -->
  <tr><td style="padding:0 44px;">
    <table width="100%" cellpadding="0" cellspacing="0"><tr><td style="height:4px;background:{accent};"></td></tr></table>
  </td></tr>

</table>
</td></tr></table>

</body>
</html>
"""


def render_email(body_html: str, today: date, settings: Settings) -> str:
    """Embed a rendered briefing fragment into the full newsletter document."""
    date_str = escape(long_date(today))
    name = escape(settings.newsletter_name)
    return EMAIL_TEMPLATE.format(
        title=f"{name} &mdash; {date_str}",
        css=BASE_CSS,
        serif=SERIF,
        sans=SANS,
        ink=INK,
        accent=ACCENT,
        name=name,
        date_str=date_str,
        audience=escape(settings.audience),
        body=body_html,
    )

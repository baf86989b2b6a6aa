"""Pipeline step functions: fetch, render, and send orchestration"""

from datetime import date

from briefmail.config import Settings
from briefmail.core.chrome import render_email
from briefmail.core.deliver import build_message, build_subject, send_email
from briefmail.core.fetch import fetch_briefing
from briefmail.core.prompt import build_prompt
from briefmail.core.render.assemble import render
from briefmail.core.utils.log import get_logger


logger = get_logger(__name__)


def run_fetch(settings: Settings, today: date, client=None) -> str:
    """Build today's prompt and return the briefing markdown."""
    prompt = build_prompt(today, settings)
    return fetch_briefing(prompt, settings, client=client)


def run_render(markdown: str, today: date, settings: Settings, fragment: bool = False) -> str:
    """Render markdown to the full newsletter HTML, or only the body fragment."""
    body = render(markdown)
    logger.info("Rendered %d characters of markdown to %d characters of HTML", len(markdown), len(body))
    if fragment:
        return body
    return render_email(body, today, settings)


def run_send(settings: Settings, markdown: str, html: str, today: date) -> list[str]:
    """Deliver the rendered briefing to every configured recipient. Returns the recipients."""
    recipients = settings.to_emails
    msg = build_message(build_subject(today, settings), markdown, html, recipients, settings)
    send_email(msg, recipients, settings)
    return recipients

"""Briefing retrieval from the Anthropic Messages API with live web search"""

import re

import anthropic

from briefmail.config import Settings
from briefmail.core.utils.log import get_logger


logger = get_logger(__name__)

FENCE_RE = re.compile(r"^\s*```(?:markdown|md)?\s*\n(.*?)\n\s*```\s*$", re.DOTALL | re.IGNORECASE)
FIRST_HEADING_RE = re.compile(r"^#{1,6}\s", re.MULTILINE)


class FetchError(RuntimeError):
    """The briefing source failed or returned nothing usable."""


def make_client(settings: Settings) -> anthropic.Anthropic:
    """Build an Anthropic client; the API key comes from ANTHROPIC_API_KEY."""
    return anthropic.Anthropic(timeout=settings.api_timeout, max_retries=settings.api_retries)


def clean_briefing(text: str) -> str:
    """Strip a wrapping code fence and any chatter before the first heading."""
    text = text.strip()
    if m := FENCE_RE.match(text):
        text = m.group(1).strip()
    if m := FIRST_HEADING_RE.search(text):
        text = text[m.start():]
    return text.strip()


def fetch_briefing(prompt: str, settings: Settings, client: anthropic.Anthropic = None) -> str:
    """Ask the model for the briefing and return its markdown text.

    All text content blocks are joined in order; tool-use and search-result
    blocks are ignored. Raises FetchError on API failure or empty text.
    """
    client = client or make_client(settings)
    logger.info("Fetching briefing with %s (max %d searches)", settings.model, settings.max_searches)
    try:
        response = client.messages.create(
            model=settings.model,
            max_tokens=settings.max_tokens,
            tools=[{"type": "web_search_20250305", "name": "web_search", "max_uses": settings.max_searches}],
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.APIError as e:
        logger.error("Anthropic API error: %s", e)
        raise FetchError(f"Anthropic API request failed: {e}") from e

    logger.info("stop_reason: %s", response.stop_reason)
    text = "".join(b.text for b in response.content if b.type == "text")
    text = clean_briefing(text)
    if not text:
        raise FetchError("No text in API response.")

    logger.info("Briefing length: %d characters", len(text))
    return text

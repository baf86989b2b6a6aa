"""Shared fixtures for core unit tests"""

from datetime import date
from types import SimpleNamespace

import pytest

from briefmail.config import Settings


SAMPLE_BRIEFING = """\
# Daily Data Center Intelligence Briefing
**Monday, October 19, 2026**
*Hubbell Incorporated — Business Development Intelligence*

---

## Top Headlines
- **Meta breaks ground on 2 GW campus** (Reuters, Oct 18) — Construction starts in Louisiana. [Read more →](https://example.com/meta?src=a&id=1)
  - *Hubbell Signal:* **High** — Medium-voltage switchgear demand at scale.
- **Eaton wins utility contract** (DCD, Oct 18) — Multi-year supply deal.
  - **Hubbell Signal:** Medium — Competitive pressure in distribution.

---

## Relevance Chart
| Topic | Category | Relevance | Key Implication |
|-------|:--------:|-----------|-----------------|
| Meta campus | Hyperscaler | High | Switchgear pull-through |
| Eaton deal | Competitor | **Low** |

## 60-Second Brief
- **Power:** Grid interconnection queues keep growing.
- ***Watch*** the Texas permitting docket.


Closing note with a *single* emphasis.
"""


@pytest.fixture(name="sample_briefing")
def sample_briefing_fixture():
    return SAMPLE_BRIEFING


@pytest.fixture(name="today")
def today_fixture():
    return date(2026, 10, 19)


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(
        smtp_host="smtp.example.com",
        smtp_user="bot@example.com",
        smtp_password="secret",
        from_email="bot@example.com",
        to_emails=["a@example.com", "b@example.com"],
    )


class FakeMessages:
    """Stands in for client.messages; records create() kwargs and returns a canned response."""

    def __init__(self, response=None, error: Exception = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.response


def make_response(*texts: str, stop_reason: str = "end_turn"):
    """Build a Messages-API-shaped response with a tool-use block followed by text blocks."""
    content = [SimpleNamespace(type="server_tool_use", name="web_search")]
    content += [SimpleNamespace(type="text", text=t) for t in texts]
    return SimpleNamespace(stop_reason=stop_reason, content=content)


@pytest.fixture(name="fake_client")
def fake_client_fixture():
    def _make(*texts: str, error: Exception = None):
        return SimpleNamespace(messages=FakeMessages(make_response(*texts), error=error))
    return _make

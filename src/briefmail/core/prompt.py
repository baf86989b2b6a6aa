"""Briefing prompt construction"""

from datetime import date
from pathlib import Path

from briefmail.config import Settings
from briefmail.core.utils.dates import cutoff_date, long_date


PROMPT_TEMPLATE = """\
Today is {today}. Your cutoff is {cutoff}; do not cite any article published before that date. \
If a section has no qualifying news, omit it entirely rather than noting the absence.

You are a senior analyst producing the Daily Data Center Intelligence Briefing for {audience}'s \
Business Development, Sales, and Executive teams. {audience} sells electrical infrastructure into \
data centers: power distribution units, switchgear, connectors, cable management, wiring devices, \
and utility-scale power systems. Every insight should be filtered through that commercial lens.

Search the web broadly: run multiple searches across U.S. news, international news, hyperscaler \
announcements, infrastructure trade press (Data Center Dynamics, DCK, The Register, Bloomberg, \
Reuters), and competitor newsrooms. Prioritize stories with direct implications for electrical \
infrastructure spend, construction activity, and power procurement.

Produce the briefing in clean Markdown using the structure below. Write with executive economy: \
tight bullets, no filler, no repetition. Include the publication date and a clickable Markdown \
link for every cited source. Use only headings, bullets (sub-bullets indented two spaces), bold, \
italic, links, horizontal rules and pipe tables.

---

# Daily Data Center Intelligence Briefing
**{date_str}**
*{audience}: Business Development Intelligence*

---

## Top Headlines
For each story (aim for 4-6):
- **[Headline]** ([Publication], [Date]): [one crisp sentence on what happened]. [Read more](URL)
  - *Signal:* **High / Medium / Low**: [one sentence on the specific commercial implication]

---

## U.S. Market Pulse
Three to five bullets on the most actionable U.S. developments: new campuses, construction starts, \
power procurement deals, permitting milestones, and regional capacity trends. Cite each bullet.

---

## Global Watch
Two to four bullets on international developments most likely to affect U.S. supply chains, \
competitor positioning, or export markets. Omit this section if nothing relevant was published.

---

## Hyperscaler Tracker
One tight bullet per hyperscaler with confirmed news in the window. Include spend figures, MW \
capacity, or location where reported. Skip any hyperscaler with no qualifying news.
- **AWS:**
- **Microsoft Azure:**
- **Google Cloud:**
- **Meta:**
- **Oracle / OpenAI / xAI:**

---

## Infrastructure & Technology Signals
Two to four bullets on power density trends, cooling-electrical integration, grid interconnection, \
AI-driven load growth, and emerging product categories. Cite each bullet.

---

## Competitor Intelligence
One bullet per competitor with news in the window: product launches, contract wins, partnerships, \
or strategic moves. Skip any competitor with no qualifying news.
- **Eaton:**
- **Schneider Electric:**
- **Vertiv:**
- **ABB:**
- **nVent:**

---

## Relevance Chart
A pipe table with columns | Topic | Category | Relevance | Key Implication |, one row per major \
story. Relevance is exactly one of High, Medium, Low.

---

## {audience} Implications
Three to five direct, actionable bullets for the BD and sales teams based on today's news. Tie \
each implication to a specific story or trend from above. Be blunt and commercial.

---

## 60-Second Brief
Eight to ten bullets: the absolute essentials for an executive who has one minute. Start each \
with a bolded topic label.

---

Tone: direct, analytical, executive-ready. No hedging, no preamble, no summary of what you are \
about to say. Output only the briefing. Nothing before the opening # heading, nothing after the \
last bullet."""


def load_template(settings: Settings) -> str:
    """Return the prompt_file template when configured, else the built-in one."""
    if settings.prompt_file:
        path = Path(settings.prompt_file)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"Cannot read prompt file {path}: {e}") from e
    return PROMPT_TEMPLATE


def build_prompt(today: date, settings: Settings) -> str:
    """Fill the template with today's date, the citation cutoff, and the audience."""
    template = load_template(settings)
    try:
        return template.format(
            today=today.strftime("%a %b %d %Y"),
            cutoff=cutoff_date(today, settings.lookback_days),
            date_str=long_date(today),
            audience=settings.audience,
        )
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(f"Invalid prompt template: unknown or malformed field {e}") from e

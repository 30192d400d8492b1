"""
Executive dashboard agent.

Turns the plain-text digest of analyzed meetings into a Markdown report:
critical alerts, per-location issue tables, trends and data coverage.
"""
import logging
from typing import Optional

from ...constants import LLM_TEMP_DASHBOARD_REPORT
from ...services.llm import LLMClient

logger = logging.getLogger(__name__)

# ============================================================================
# PROMPTS
# ============================================================================

DASHBOARD_PROMPT_TEMPLATE = """You are a strategic analyst creating a high-impact "Executive Dashboard" from these meeting summaries.
{focus}
**Goal**: Provide a highly visual, easy-to-scan summary of what is happening in local government.

**CRITICAL INSTRUCTION**: You must analyze ALL provided meeting summaries. Do not skip any location or meeting.

**Format Requirements**:

# 🚨 Critical Alerts
*   List the top 3-5 most urgent or high-impact issues across ALL meetings.
*   Use bolding for the **Issue Title**.
*   Briefly explain *why* it is critical.

# 📍 Location Breakdown
*   Group the analysis by **City/State**.
*   For each location, create a subsection (e.g., "## Tupelo, MS").
*   List the meetings analyzed for that location.
*   **Issues Table**: Create a Markdown table for that location with columns:
    *   **Category** (Real Estate, Business, etc.)
    *   **Issue** (Brief Title)
    *   **Impact** (High/Med/Low)
    *   **Details** (1 sentence summary)
*   *Ensure EVERY significant issue from the transcripts is included in these tables.*

# 📊 Trend Analysis
*   Identify 2-3 recurring themes or patterns appearing across multiple locations (if any).

# ℹ️ Data Coverage
*   State the total number of meetings analyzed in this report.
*   List the unique locations covered.

**Input Summaries**:
{summaries}
"""

CATEGORY_FOCUS_TEMPLATE = (
    "**FOCUS**: The user is specifically interested in **{category}** issues. "
    "Only include analysis related to this category.\n"
)


def build_dashboard_prompt(summaries: str, category: Optional[str] = None) -> str:
    focus = CATEGORY_FOCUS_TEMPLATE.format(category=category) if category else ""
    return DASHBOARD_PROMPT_TEMPLATE.format(focus=focus, summaries=summaries)


def write_dashboard_report(summaries: str, llm: LLMClient, category: Optional[str] = None) -> str:
    """
    Ask the LLM for the Markdown dashboard covering `summaries`.

    Returns:
        The raw completion text (Markdown report)
    """
    logger.info(f"[Dashboard] Summaries length: {len(summaries)} chars (category={category!r})")
    return llm.complete(build_dashboard_prompt(summaries, category), temperature=LLM_TEMP_DASHBOARD_REPORT)

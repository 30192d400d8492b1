"""
Report aggregation: every analyzed meeting in the store, optionally narrowed
to one issue category, rendered as a digest and summarized by the LLM into a
Markdown executive dashboard.
"""
import logging
from typing import List, Optional

from townhall.agents.analysis import write_dashboard_report
from townhall.constants import VideoStatus
from townhall.core.errors import NotFoundError
from townhall.core.executor import run_blocking
from townhall.models import VideoRecord
from townhall.services.llm import LLMClient
from townhall.services.storage import VideoStore
from townhall.utils.report_formatter import build_digest

logger = logging.getLogger(__name__)


def _location_key(record: VideoRecord) -> str:
    location = record.analysis.location
    return location.sort_key() if location else ""


def sort_for_report(records: List[VideoRecord]) -> List[VideoRecord]:
    """
    Order by location (state + city, ascending), then most recent meeting first.

    Two stable sorts: secondary key first, primary key second.
    """
    by_date = sorted(records, key=lambda r: r.analysis.meeting_date or "", reverse=True)
    return sorted(by_date, key=_location_key)


def select_for_report(records: List[VideoRecord], category: Optional[str] = None) -> List[VideoRecord]:
    """
    Analyzed records, filtered to those with at least one `category` issue, in report order.

    Raises:
        NotFoundError: If no record is analyzed at all
    """
    analyzed = [r for r in records if r.status == VideoStatus.ANALYZED and r.analysis is not None]
    logger.info(f"[Report] Found {len(analyzed)} analyzed videos out of {len(records)}")

    if not analyzed:
        raise NotFoundError("No analyzed videos found.")

    relevant = analyzed
    if category:
        relevant = [r for r in analyzed if r.analysis.issues_in(category)]
        logger.info(f"[Report] Found {len(relevant)} relevant videos for category {category!r}")

    return sort_for_report(relevant)


async def generate_report(store: VideoStore, llm: LLMClient, category: Optional[str] = None) -> str:
    """
    Build the Markdown dashboard for all analyzed meetings.

    Args:
        store: Video record store
        llm: Completion client (called exactly once)
        category: Optional issue category to focus on (exact match)

    Returns:
        The LLM's report text

    Raises:
        NotFoundError: If no analyzed records exist (no LLM call is made)
        ExternalServiceError: If the LLM call fails
    """
    records = await store.list()
    selected = select_for_report(records, category)
    digest = build_digest(selected, category)
    return await run_blocking(write_dashboard_report, digest, llm, category)

"""
Plain-text digest of analyzed meetings, used as input for the dashboard prompt.
"""
from typing import Iterable, Optional

from ..constants import UNKNOWN_DATE, UNKNOWN_LOCATION
from ..models import VideoRecord


def format_location(record: VideoRecord) -> str:
    location = record.analysis.location if record.analysis else None
    if location is None:
        return UNKNOWN_LOCATION
    return location.display()


def format_meeting_block(record: VideoRecord, category: Optional[str] = None) -> str:
    """
    Text block for one analyzed meeting.

    With a category, only the issues of that category are listed.
    """
    analysis = record.analysis
    issue_lines = [issue.render() for issue in analysis.issues_in(category)]

    lines = [
        f"Meeting: {record.title or record.id}",
        f"Date: {analysis.meeting_date or UNKNOWN_DATE}",
        f"Location: {format_location(record)}",
        f"Type: {analysis.meeting_type or 'Unknown'}",
        "Issues:",
        *issue_lines,
    ]
    return "\n".join(lines)


def build_digest(records: Iterable[VideoRecord], category: Optional[str] = None) -> str:
    """Meeting blocks in the given order, separated by blank lines."""
    return "\n\n".join(format_meeting_block(record, category) for record in records)

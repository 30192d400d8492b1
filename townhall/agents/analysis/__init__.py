"""
Agents d'analyse - Analyse des réunions et rapport de synthèse.
"""
from .meeting import extract_meeting_analysis, summarize_meeting, build_analysis_prompt
from .dashboard import write_dashboard_report, build_dashboard_prompt

__all__ = [
    "extract_meeting_analysis",
    "summarize_meeting",
    "build_analysis_prompt",
    "write_dashboard_report",
    "build_dashboard_prompt",
]

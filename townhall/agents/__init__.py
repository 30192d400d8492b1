# -*- coding: utf-8 -*-
"""
Agents LLM pour l'analyse des réunions publiques.

- analysis: extraction des sujets civiques d'une transcription et
  rédaction du tableau de bord de synthèse
"""
from .analysis import (
    extract_meeting_analysis,
    summarize_meeting,
    write_dashboard_report,
)

__all__ = [
    "extract_meeting_analysis",
    "summarize_meeting",
    "write_dashboard_report",
]

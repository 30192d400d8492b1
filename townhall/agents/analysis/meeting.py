"""
Meeting analysis agent.

Turns a townhall / council meeting transcript into structured civic-issue
data (summary, meeting date and type, location, issues by category).

Two prompts:
- the full analysis used by the research pipeline (stored on the record)
- a lighter one-shot summary (summary + issues) that is never stored
"""
import logging
from typing import Any, Dict

from pydantic import ValidationError

from ...constants import LLM_TEMP_MEETING_ANALYSIS, TRANSCRIPT_MAX_LENGTH_FOR_ANALYSIS
from ...core.errors import LLMParseError
from ...models import MeetingAnalysis
from ...prompts import JSON_OUTPUT_STRICT, OBJECTIVITY_INSTRUCTION, SCHEMA_ISSUE, SCHEMA_LOCATION
from ...services.llm import LLMClient, parse_json_response

logger = logging.getLogger(__name__)

# ============================================================================
# PROMPTS
# ============================================================================

ANALYSIS_INSTRUCTIONS = f"""Analyze the following townhall meeting transcript.

Output a JSON object with the following structure:
{{
    "summary": "Concise summary of the meeting.",
    "meetingDate": "YYYY-MM-DD (if mentioned, else null)",
    "meetingType": "e.g. City Council, Planning Commission, etc.",
    "location": {SCHEMA_LOCATION},
    "issues": [
        {SCHEMA_ISSUE}
    ]
}}
{OBJECTIVITY_INSTRUCTION}
{JSON_OUTPUT_STRICT}"""

QUICK_SUMMARY_INSTRUCTIONS = f"""You are an expert policy analyst. Analyze the following townhall meeting transcript.

Output a JSON object with the following structure:
{{
    "summary": "A concise executive summary of the meeting (HTML format allowed, e.g. <p>, <strong>).",
    "issues": [
        {{
            "title": "Short title of the issue",
            "description": "Brief description of the issue and the sentiment/outcome."
        }}
    ]
}}
{JSON_OUTPUT_STRICT}"""


def _with_transcript(instructions: str, transcript: str) -> str:
    return f"{instructions}\nTranscript:\n{transcript[:TRANSCRIPT_MAX_LENGTH_FOR_ANALYSIS]}\n"


def build_analysis_prompt(transcript: str) -> str:
    """Analysis prompt with the transcript truncated to the context budget."""
    return _with_transcript(ANALYSIS_INSTRUCTIONS, transcript)


# ============================================================================
# LOGIC
# ============================================================================

def extract_meeting_analysis(transcript: str, llm: LLMClient) -> MeetingAnalysis:
    """
    Extract structured civic-issue data from a meeting transcript.

    Args:
        transcript: Full transcript text (truncated before sending)
        llm: Completion client

    Returns:
        MeetingAnalysis parsed from the LLM response

    Raises:
        LLMParseError: If the response is not JSON or does not fit the schema
        ExternalServiceError: If the LLM call fails
    """
    response_text = llm.complete(build_analysis_prompt(transcript), temperature=LLM_TEMP_MEETING_ANALYSIS)
    parsed = parse_json_response(response_text)

    if not isinstance(parsed, dict):
        raise LLMParseError("LLM returned JSON that is not an object")

    try:
        analysis = MeetingAnalysis.model_validate(parsed)
    except ValidationError as e:
        raise LLMParseError(f"LLM returned JSON that does not match the analysis schema: {e}") from e

    logger.info(f"[MeetingAnalysis] Extracted {len(analysis.issues)} issues")
    return analysis


def summarize_meeting(transcript: str, llm: LLMClient) -> Dict[str, Any]:
    """
    One-shot summary (summary + issues) of a transcript, returned as parsed JSON.

    Raises:
        LLMParseError: If the response is not valid JSON
    """
    response_text = llm.complete(
        _with_transcript(QUICK_SUMMARY_INSTRUCTIONS, transcript),
        temperature=LLM_TEMP_MEETING_ANALYSIS,
    )
    return parse_json_response(response_text)

"""
Analysis step: stored transcript -> LLM -> structured meeting analysis.

Also hosts the one-shot analysis (URL in, summary out) that bypasses the store.
"""
import logging
from typing import Any, Dict

from townhall.agents.analysis import extract_meeting_analysis, summarize_meeting
from townhall.constants import VideoStatus
from townhall.core.errors import InvalidInputError, NotFoundError, PreconditionError
from townhall.core.executor import run_blocking
from townhall.models import VideoRecord
from townhall.services.llm import LLMClient
from townhall.services.storage import VideoStore
from townhall.utils.transcript import TranscriptProvider
from townhall.utils.youtube import extract_video_id

logger = logging.getLogger(__name__)


async def analyze_video(video_id: str, store: VideoStore, llm: LLMClient) -> VideoRecord:
    """
    Analyze the stored transcript of `video_id`.

    Already-analyzed records are returned unchanged without calling the LLM.

    Args:
        video_id: Identifier of an ingested video
        store: Video record store
        llm: Completion client

    Returns:
        The analyzed record, as persisted

    Raises:
        NotFoundError: If the video was not ingested or has no transcript
        LLMParseError: If the LLM response is not valid JSON
        ExternalServiceError: If the LLM call fails
    """
    record = await store.get(video_id)

    if record is None or record.status == VideoStatus.ERROR or not (record.transcript or "").strip():
        raise NotFoundError("Transcript not found. Please ingest first.")

    if record.status == VideoStatus.ANALYZED:
        logger.info(f"[Analysis] {video_id} already analyzed, returning stored result")
        return record

    analysis = await run_blocking(extract_meeting_analysis, record.transcript, llm)

    updated = record.with_analysis(analysis)
    await store.set(video_id, updated)
    logger.info(f"[Analysis] {video_id} analyzed: {len(analysis.issues)} issues")
    return updated


async def quick_analyze(url: str, provider: TranscriptProvider, llm: LLMClient) -> Dict[str, Any]:
    """
    Fetch and summarize a video in one call, without touching the store.

    Raises:
        InvalidInputError: If no video id can be extracted from `url`
        PreconditionError: If the video has no usable captions (code NO_CAPTIONS)
        LLMParseError: If the LLM response is not valid JSON
    """
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidInputError("Invalid YouTube URL")

    try:
        video = await run_blocking(provider.fetch, video_id)
    except Exception as e:
        logger.error(f"[Analysis] Transcript fetch error for {video_id}: {e}")
        raise PreconditionError("No captions found for this video.", code="NO_CAPTIONS") from e

    transcript = video.text
    if not transcript.strip():
        raise PreconditionError("No captions found for this video.", code="NO_CAPTIONS")

    return await run_blocking(summarize_meeting, transcript, llm)

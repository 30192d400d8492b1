"""
Ingestion pipeline: video URLs in, stored transcript records out.

URLs are processed one at a time, in input order, with a single transcript
provider shared by the whole batch. A failure on one URL is recorded on that
URL's result (and stored when the URL had a valid id); it never stops the batch.
"""
import logging
from typing import List, Sequence

from townhall.constants import VideoStatus
from townhall.core.executor import run_blocking
from townhall.models import IngestResult, VideoRecord
from townhall.services.storage import VideoStore
from townhall.utils.transcript import TranscriptProvider
from townhall.utils.youtube import extract_video_id

logger = logging.getLogger(__name__)


async def ingest_url(url: str, store: VideoStore, provider: TranscriptProvider) -> IngestResult:
    """
    Ingest a single URL.

    - No video id in the URL: "Invalid URL" stub, nothing stored
    - Already analyzed: stored record returned as-is, tagged cached
    - Otherwise: transcript fetched and a fetched/error record stored; a
      failed write yields an unsaved error stub for that URL only
    """
    video_id = extract_video_id(url)
    if not video_id:
        logger.warning(f"[Ingest] Invalid URL: {url!r}")
        return IngestResult.invalid_url(url)

    existing = await store.get(video_id)
    if existing and existing.status == VideoStatus.ANALYZED:
        logger.info(f"[Ingest] Cache hit for {video_id}")
        return IngestResult(url=url, record=existing, cached=True)

    try:
        video = await run_blocking(provider.fetch, video_id)
        record = VideoRecord.fetched(video_id, url, video.title, video.text)
    except Exception as e:
        # Provider failures (disabled captions, unavailable video, network) stay per-item
        logger.error(f"[Ingest] Error processing {video_id}: {e}")
        record = VideoRecord.failed(video_id, url, str(e) or type(e).__name__)

    try:
        await store.set(video_id, record)
    except Exception as e:
        logger.error(f"[Ingest] Could not store {video_id}: {e}")
        return IngestResult(url=url, error=f"Storage error: {e}")

    logger.info(f"[Ingest] {video_id} -> {record.status.value}")
    return IngestResult(url=url, record=record)


async def ingest_urls(urls: Sequence[str], store: VideoStore, provider: TranscriptProvider) -> List[IngestResult]:
    """
    Ingest a batch of URLs sequentially.

    Args:
        urls: Candidate video URLs, processed in order
        store: Video record store
        provider: Transcript provider reused for every URL of the batch

    Returns:
        One result per URL, in input order
    """
    results = []
    for url in urls:
        results.append(await ingest_url(url, store, provider))

    failed = sum(1 for r in results if r.status == VideoStatus.ERROR)
    logger.info(f"[Ingest] Batch done: {len(results)} urls, {failed} errors")
    return results

"""
Utility to fetch the transcript and title of a YouTube video.

Uses youtube-transcript-api for caption segments and yt-dlp for the
video metadata (title). One provider instance is created per ingest
batch and reused for every video of that batch.
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol, Sequence

import yt_dlp
from youtube_transcript_api import YouTubeTranscriptApi

from .youtube import build_watch_url

logger = logging.getLogger(__name__)


@dataclass
class TranscriptSegment:
    """A timestamped snippet of spoken text."""
    text: str
    start: float = 0.0
    duration: float = 0.0


@dataclass
class FetchedVideo:
    video_id: str
    title: Optional[str] = None
    segments: List[TranscriptSegment] = field(default_factory=list)

    @property
    def text(self) -> str:
        return join_segments(self.segments)


def join_segments(segments: Iterable[TranscriptSegment]) -> str:
    """Segment texts in original order, separated by single spaces."""
    return " ".join(segment.text for segment in segments)


class TranscriptProvider(Protocol):
    def fetch(self, video_id: str) -> FetchedVideo:
        """Title and ordered transcript segments; raises when captions are unavailable."""
        ...


class YouTubeTranscriptProvider:
    """
    Transcript provider backed by youtube-transcript-api and yt-dlp.

    Usage:
        with YouTubeTranscriptProvider(languages=["en"]) as provider:
            video = provider.fetch("dQw4w9WgXcQ")
    """

    def __init__(self, languages: Sequence[str] = ("en",)):
        self.languages = list(languages)
        self._transcripts = YouTubeTranscriptApi()
        self._ydl = yt_dlp.YoutubeDL({
            'quiet': True,
            'no_warnings': True,
            'skip_download': True,
        })

    def __enter__(self) -> "YouTubeTranscriptProvider":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._ydl.close()

    def fetch(self, video_id: str) -> FetchedVideo:
        title = self._fetch_title(video_id)

        # Raises TranscriptsDisabled / NoTranscriptFound / VideoUnavailable etc.
        fetched = self._transcripts.fetch(video_id, languages=self.languages)
        segments = [
            TranscriptSegment(text=snippet.text, start=snippet.start, duration=snippet.duration)
            for snippet in fetched
        ]
        logger.info(f"[Transcript] {video_id}: {len(segments)} segments")
        return FetchedVideo(video_id=video_id, title=title, segments=segments)

    def _fetch_title(self, video_id: str) -> Optional[str]:
        # A missing title does not prevent analysis, so metadata errors are not fatal
        try:
            info = self._ydl.extract_info(build_watch_url(video_id), download=False, process=False)
        except yt_dlp.utils.DownloadError as e:
            logger.warning(f"[Transcript] Title lookup failed for {video_id}: {e}")
            return None
        return (info or {}).get("title")

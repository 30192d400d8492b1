"""Shared fixtures: offline fakes for the transcript provider, the LLM and MongoDB."""
import json
from typing import Dict, List, Optional

import pytest

from townhall.config import get_settings
from townhall.constants import VideoStatus
from townhall.models import Issue, Location, MeetingAnalysis, VideoRecord
from townhall.services.storage import FileVideoStore, get_store
from townhall.utils.transcript import FetchedVideo, TranscriptSegment


class FakeProvider:
    """Transcript provider returning canned segments (or raising) per video id."""

    def __init__(self, videos: Optional[Dict[str, object]] = None):
        self.videos = videos or {}
        self.calls: List[str] = []

    def fetch(self, video_id: str) -> FetchedVideo:
        self.calls.append(video_id)
        entry = self.videos.get(video_id)
        if isinstance(entry, Exception):
            raise entry
        if entry is None:
            raise RuntimeError(f"Transcript is disabled on this video: {video_id}")
        title, texts = entry
        return FetchedVideo(
            video_id=video_id,
            title=title,
            segments=[TranscriptSegment(text=t, start=float(i)) for i, t in enumerate(texts)],
        )


class FakeLLM:
    """LLM returning scripted responses in order and recording every prompt."""

    def __init__(self, *responses: str):
        self.responses = list(responses)
        self.prompts: List[str] = []

    def complete(self, prompt: str, temperature: float = 0.2) -> str:
        self.prompts.append(prompt)
        if not self.responses:
            raise AssertionError("Unexpected LLM call")
        return self.responses.pop(0)


class FakeCursor:
    def __init__(self, docs):
        self._docs = list(docs)

    def __aiter__(self):
        return self

    async def __anext__(self):
        if not self._docs:
            raise StopAsyncIteration
        return self._docs.pop(0)


class FakeCollection:
    """Subset of the motor collection API used by MongoVideoStore."""

    def __init__(self):
        self.docs: Dict[str, dict] = {}

    async def find_one(self, query):
        doc = self.docs.get(query["_id"])
        return json.loads(json.dumps(doc)) if doc is not None else None

    async def replace_one(self, query, document, upsert=False):
        assert upsert
        self.docs[query["_id"]] = json.loads(json.dumps(document))

    def find(self, query):
        return FakeCursor(json.loads(json.dumps(list(self.docs.values()))))


ANALYSIS_JSON = json.dumps({
    "summary": "Council discussed the new bridge and the budget.",
    "meetingDate": "2024-03-01",
    "meetingType": "City Council",
    "location": {"city": "Tupelo", "county": "Lee", "state": "MS"},
    "issues": [
        {"title": "Bridge repair", "description": "Funding approved.", "category": "Infrastructure"},
        {"title": "Tax levy", "description": "Residents opposed.", "category": "Budget"},
    ],
})


def make_analyzed(
    video_id: str,
    state: Optional[str] = None,
    city: Optional[str] = None,
    meeting_date: Optional[str] = None,
    categories: tuple = ("Budget",),
    title: Optional[str] = None,
) -> VideoRecord:
    location = Location(state=state, city=city) if (state or city) else None
    issues = [
        Issue(title=f"{category} item", description=f"About {category.lower()}.", category=category)
        for category in categories
    ]
    return VideoRecord(
        id=video_id,
        url=f"https://youtu.be/{video_id}",
        title=title or f"Meeting {video_id}",
        transcript="Some transcript",
        analysis=MeetingAnalysis(
            summary="Summary",
            issues=issues,
            meeting_date=meeting_date,
            meeting_type="City Council",
            location=location,
        ),
        status=VideoStatus.ANALYZED,
    )


@pytest.fixture
def store(tmp_path) -> FileVideoStore:
    return FileVideoStore(tmp_path / "data")


@pytest.fixture
def fake_collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Settings and store are cached per process; tests start from a clean environment."""
    for var in ("STORAGE_BACKEND", "DATABASE_URL", "DATA_DIR", "OPENAI_API_KEY", "REQUEST_LOG_PATH"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    get_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_store.cache_clear()

from datetime import datetime, timezone
from typing import Dict, Any, Optional, List
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator, model_validator
from pydantic.alias_generators import to_camel

from townhall.constants import VideoStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Location(BaseModel):
    """Where a meeting took place, as far as the LLM could tell."""
    city: Optional[str] = None
    county: Optional[str] = None
    state: Optional[str] = None

    def sort_key(self) -> str:
        """State then city, concatenated; missing parts count as empty."""
        return f"{self.state or ''}{self.city or ''}"

    def display(self) -> str:
        return f"{self.city or ''}, {self.state or ''}"


class Issue(BaseModel):
    """A civic topic raised during a meeting."""
    title: str
    description: str
    category: Optional[str] = None

    def render(self) -> str:
        return f"- [{self.category or 'Other'}] {self.title}: {self.description}"


class MeetingAnalysis(BaseModel):
    """
    Structured result extracted by the LLM from one transcript.

    Keys are camelCase on the wire (meetingDate, meetingType) and
    snake_case in Python.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: str = ""
    issues: List[Issue] = Field(default_factory=list)
    meeting_date: Optional[str] = None
    meeting_type: Optional[str] = None
    location: Optional[Location] = None

    @field_validator("issues", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value

    @field_validator("summary", mode="before")
    @classmethod
    def _none_is_blank(cls, value):
        return "" if value is None else value

    def issues_in(self, category: Optional[str]) -> List[Issue]:
        """Issues matching `category` exactly, or all issues when no category is given."""
        if not category:
            return list(self.issues)
        return [issue for issue in self.issues if issue.category == category]


class VideoRecord(BaseModel):
    """
    One stored video, keyed by its YouTube id.

    Schema (camelCase JSON):
    {
        "id": "abc12345678",
        "url": "https://youtu.be/abc12345678",
        "title": "City Council - March 4",
        "transcript": "...",
        "analysis": {"summary": "...", "issues": [...], "meetingDate": "2024-03-04", ...},
        "status": "analyzed",
        "updatedAt": "2024-03-05T10:00:00+00:00"
    }

    `analysis` is present iff status is analyzed, `error` iff status is error.
    Records are replaced whole, never patched.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "videoId", "_id"))
    url: str
    title: Optional[str] = None
    transcript: Optional[str] = None
    analysis: Optional[MeetingAnalysis] = None
    status: VideoStatus
    error: Optional[str] = None
    updated_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def _check_status_fields(self) -> "VideoRecord":
        if (self.analysis is not None) != (self.status == VideoStatus.ANALYZED):
            raise ValueError("analysis must be present exactly when status is 'analyzed'")
        if (self.error is not None) != (self.status == VideoStatus.ERROR):
            raise ValueError("error must be present exactly when status is 'error'")
        return self

    @classmethod
    def fetched(cls, video_id: str, url: str, title: Optional[str], transcript: str) -> "VideoRecord":
        """Record for a completed transcript fetch; an empty transcript is an error."""
        if transcript and transcript.strip():
            return cls(id=video_id, url=url, title=title, transcript=transcript, status=VideoStatus.FETCHED)
        return cls(
            id=video_id,
            url=url,
            title=title,
            transcript=transcript,
            status=VideoStatus.ERROR,
            error="No transcript found",
        )

    @classmethod
    def failed(cls, video_id: str, url: str, message: str) -> "VideoRecord":
        return cls(id=video_id, url=url, status=VideoStatus.ERROR, error=message)

    def with_analysis(self, analysis: MeetingAnalysis) -> "VideoRecord":
        """New record carrying `analysis`, status analyzed and a fresh timestamp."""
        data = self.model_dump()
        data.update(analysis=analysis, status=VideoStatus.ANALYZED, error=None, updated_at=utcnow())
        return VideoRecord.model_validate(data)

    def to_document(self, include_transcript: bool = True) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys; unset optional fields are omitted."""
        exclude = None if include_transcript else {"transcript"}
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude=exclude)


class IngestResult(BaseModel):
    """
    Outcome for one URL of an ingest batch.

    Either a stored record (fresh or served from cache) or, for URLs
    without a video id or whose record could not be written, a bare error
    stub that was never persisted.
    """
    url: str
    record: Optional[VideoRecord] = None
    cached: bool = False
    error: Optional[str] = None

    @property
    def status(self) -> VideoStatus:
        return self.record.status if self.record else VideoStatus.ERROR

    @classmethod
    def invalid_url(cls, url: str) -> "IngestResult":
        return cls(url=url, error="Invalid URL")

    def to_response(self, include_transcript: bool = True) -> Dict[str, Any]:
        if self.record is None:
            return {"url": self.url, "status": VideoStatus.ERROR.value, "error": self.error}
        payload = self.record.to_document(include_transcript=include_transcript)
        if self.cached:
            payload["cached"] = True
        return payload

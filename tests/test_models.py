from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from townhall.constants import VideoStatus
from townhall.models import IngestResult, Issue, MeetingAnalysis, VideoRecord


def test_fetched_record_with_transcript():
    record = VideoRecord.fetched("abc12345678", "https://youtu.be/abc12345678", "Council", "Hello world")
    assert record.status == VideoStatus.FETCHED
    assert record.error is None
    assert record.analysis is None


def test_fetched_record_without_transcript_is_error():
    record = VideoRecord.fetched("abc12345678", "https://youtu.be/abc12345678", None, "")
    assert record.status == VideoStatus.ERROR
    assert record.error == "No transcript found"


def test_analysis_requires_analyzed_status():
    with pytest.raises(ValidationError):
        VideoRecord(id="abc12345678", url="u", status=VideoStatus.FETCHED, analysis=MeetingAnalysis(summary="x"))
    with pytest.raises(ValidationError):
        VideoRecord(id="abc12345678", url="u", status=VideoStatus.ANALYZED)


def test_error_requires_error_status():
    with pytest.raises(ValidationError):
        VideoRecord(id="abc12345678", url="u", status=VideoStatus.FETCHED, error="boom")
    with pytest.raises(ValidationError):
        VideoRecord(id="abc12345678", url="u", status=VideoStatus.ERROR)


def test_with_analysis_returns_new_analyzed_record():
    old_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
    record = VideoRecord(
        id="abc12345678", url="u", transcript="text", status=VideoStatus.FETCHED, updated_at=old_time
    )
    updated = record.with_analysis(MeetingAnalysis(summary="s"))

    assert updated.status == VideoStatus.ANALYZED
    assert updated.analysis.summary == "s"
    assert updated.transcript == "text"
    assert updated.updated_at > old_time
    assert record.status == VideoStatus.FETCHED


def test_document_uses_camel_case_and_omits_empty_fields():
    analysis = MeetingAnalysis.model_validate({
        "summary": "s",
        "meetingDate": "2024-03-01",
        "meetingType": "Planning Commission",
        "issues": None,
    })
    record = VideoRecord(id="abc12345678", url="u", transcript="t", analysis=analysis, status="analyzed")
    doc = record.to_document()

    assert doc["id"] == "abc12345678"
    assert doc["status"] == "analyzed"
    assert "updatedAt" in doc
    assert doc["analysis"]["meetingDate"] == "2024-03-01"
    assert doc["analysis"]["meetingType"] == "Planning Commission"
    assert doc["analysis"]["issues"] == []
    assert "error" not in doc and "title" not in doc
    assert "transcript" not in record.to_document(include_transcript=False)


def test_record_accepts_legacy_video_id_key():
    record = VideoRecord.model_validate({
        "videoId": "abc12345678",
        "url": "u",
        "status": "fetched",
        "transcript": "t",
        "updatedAt": "2024-03-05T10:00:00.000Z",
    })
    assert record.id == "abc12345678"
    assert record.updated_at.tzinfo is not None


def test_issues_in_filters_by_exact_category():
    analysis = MeetingAnalysis.model_validate({
        "summary": "s",
        "issues": [
            {"title": "a", "description": "d", "category": "Budget"},
            {"title": "b", "description": "d", "category": "budget"},
            {"title": "c", "description": "d"},
        ],
    })
    assert [i.title for i in analysis.issues_in("Budget")] == ["a"]
    assert len(analysis.issues_in(None)) == 3


def test_invalid_url_result_response():
    result = IngestResult.invalid_url("nope")
    assert result.status == VideoStatus.ERROR
    assert result.to_response() == {"url": "nope", "status": "error", "error": "Invalid URL"}


def test_issue_render_without_category_uses_other():
    issue = Issue(title="Parking", description="More spaces downtown.")
    assert issue.render() == "- [Other] Parking: More spaces downtown."

    issue = Issue(title="Levy", description="Raised.", category="Budget")
    assert issue.render() == "- [Budget] Levy: Raised."


def test_null_summary_reads_as_blank():
    analysis = MeetingAnalysis.model_validate({"summary": None, "issues": None})
    assert analysis.summary == ""
    assert analysis.issues == []

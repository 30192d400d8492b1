"""
API FastAPI pour la veille des réunions publiques.

Research pipeline, one synchronous batch job per call:
- POST /api/research/ingest           URLs -> stored transcripts
- POST /api/research/analyze          video id -> structured analysis
- POST /api/research/generate-report  analyzed meetings -> Markdown dashboard

Plus a one-shot POST /api/analyze (URL -> summary, nothing stored) and
read-only record lookups.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Iterator, List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from townhall.config import get_settings
from townhall.constants import StorageBackend, VideoStatus
from townhall.core.analysis import analyze_video, quick_analyze
from townhall.core.errors import NotFoundError, TownhallError
from townhall.core.ingest import ingest_urls
from townhall.core.report import generate_report
from townhall.logging_setup import configure_logging, log_request
from townhall.services.llm import LazyLLMClient, LLMClient
from townhall.services.storage import VideoStore, get_store
from townhall.utils.transcript import TranscriptProvider, YouTubeTranscriptProvider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings)

    if settings.resolved_storage_backend == StorageBackend.MONGO:
        from townhall.db.mongo import ensure_indexes, close_mongo_connection

        await ensure_indexes()
        yield
        close_mongo_connection()
    else:
        yield


app = FastAPI(
    title="Townhall Digest API",
    description="Ingests public meeting videos, extracts civic issues and writes executive reports",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ===========================
# ERROR HANDLING
# ===========================

@app.exception_handler(TownhallError)
async def townhall_error_handler(request: Request, exc: TownhallError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"[API] {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are bad input (400), not 422."""
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"Invalid input: '{field}' {first.get('msg', 'is invalid')}" if field else "Invalid input"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[API] Unexpected error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


# ===========================
# DEPENDENCIES
# ===========================

def get_video_store() -> VideoStore:
    return get_store()


def get_llm() -> LLMClient:
    return LazyLLMClient()


def get_transcript_provider() -> Iterator[TranscriptProvider]:
    """One provider per request, shared by every URL of an ingest batch."""
    provider = YouTubeTranscriptProvider(languages=get_settings().transcript_languages_list)
    try:
        yield provider
    finally:
        provider.close()


# ===========================
# SCHEMAS
# ===========================

class IngestRequest(BaseModel):
    """Requête d'ingestion d'une liste d'URLs."""
    urls: List[str] = Field(description="Video URLs, processed in order")


class AnalyzeVideoRequest(BaseModel):
    """Requête d'analyse d'une vidéo déjà ingérée."""
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(alias="videoId", min_length=1)


class ReportFilters(BaseModel):
    category: Optional[str] = None


class ReportRequest(BaseModel):
    filters: Optional[ReportFilters] = None


class QuickAnalyzeRequest(BaseModel):
    url: str = Field(min_length=1)


# ===========================
# ROUTES
# ===========================

@app.get("/")
async def root():
    """Endpoint racine pour vérifier que l'API fonctionne."""
    return {
        "message": "Townhall Digest API",
        "version": "1.0.0",
        "endpoints": {
            "ingest": "/api/research/ingest",
            "analyze": "/api/research/analyze",
            "report": "/api/research/generate-report",
            "quick_analyze": "/api/analyze",
            "docs": "/docs",
        }
    }


@app.get("/health")
async def health_check():
    """Endpoint de santé pour vérifier que l'API est opérationnelle."""
    settings = get_settings()
    return {
        "status": "healthy",
        "storage_backend": settings.resolved_storage_backend.value,
        "openai_configured": bool(settings.openai_api_key),
    }


@app.post("/api/research/ingest")
async def ingest(
    request: IngestRequest,
    store: VideoStore = Depends(get_video_store),
    provider: TranscriptProvider = Depends(get_transcript_provider),
) -> Dict[str, Any]:
    """
    Fetch and store transcripts for a batch of URLs.

    Per-URL failures are reported in the results, never as an HTTP error.
    """
    results = await ingest_urls(request.urls, store, provider)
    log_request(
        "ingest",
        urls=len(request.urls),
        cached=sum(1 for r in results if r.cached),
        errors=sum(1 for r in results if r.status == VideoStatus.ERROR),
    )
    return {"results": [r.to_response() for r in results]}


@app.post("/api/research/analyze")
async def analyze(
    request: AnalyzeVideoRequest,
    store: VideoStore = Depends(get_video_store),
    llm: LLMClient = Depends(get_llm),
) -> Dict[str, Any]:
    """
    Analyze an ingested video.

    Raises:
        404: Video not ingested or without transcript
        500: LLM failure or unparseable LLM response
    """
    record = await analyze_video(request.video_id, store, llm)
    log_request("analyze", video_id=record.id, status=record.status.value)
    return record.to_document()


@app.post("/api/research/generate-report")
async def report(
    request: Optional[ReportRequest] = None,
    store: VideoStore = Depends(get_video_store),
    llm: LLMClient = Depends(get_llm),
) -> Dict[str, str]:
    """
    Markdown executive dashboard over all analyzed videos.

    Raises:
        404: No analyzed videos (no LLM call is made)
    """
    category = request.filters.category if request and request.filters else None
    text = await generate_report(store, llm, category=category)
    log_request("generate-report", category=category, length=len(text))
    return {"report": text}


@app.post("/api/analyze")
async def analyze_url(
    request: QuickAnalyzeRequest,
    provider: TranscriptProvider = Depends(get_transcript_provider),
    llm: LLMClient = Depends(get_llm),
) -> Dict[str, Any]:
    """
    One-shot analysis of a single URL; nothing is stored.

    Raises:
        400: Invalid YouTube URL
        422: No captions found (code NO_CAPTIONS)
    """
    result = await quick_analyze(request.url, provider, llm)
    log_request("quick-analyze", url=request.url)
    return result


@app.get("/api/research/videos")
async def list_videos(store: VideoStore = Depends(get_video_store)) -> Dict[str, Any]:
    """Stored records (without transcripts), most recently updated first."""
    records = sorted(await store.list(), key=lambda r: r.updated_at, reverse=True)
    return {
        "videos": [r.to_document(include_transcript=False) for r in records],
        "total_count": len(records),
    }


@app.get("/api/research/videos/{video_id}")
async def get_video(video_id: str, store: VideoStore = Depends(get_video_store)) -> Dict[str, Any]:
    record = await store.get(video_id)
    if record is None:
        raise NotFoundError(f"Video {video_id} not found")
    return record.to_document()

"""
Key-value store for video records.

One JSON record per video id. Two interchangeable backends implement the
same three operations (get / set / list):

- FileVideoStore: `<data_dir>/<video_id>.json` on the local filesystem
- MongoVideoStore: one document per video in a MongoDB collection (motor)

The backend is chosen once per process by `get_store()` from settings;
callers only ever see the `VideoStore` protocol.
"""
import asyncio
import json
import logging
import os
import re
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from pydantic import ValidationError

from ..config import get_settings
from ..constants import RECORD_FILE_SUFFIX, StorageBackend
from ..models import VideoRecord

logger = logging.getLogger(__name__)

_SAFE_KEY_RE = re.compile(r"^[0-9A-Za-z_-]+$")


class VideoStore(Protocol):
    async def get(self, key: str) -> Optional[VideoRecord]:
        """Stored record for `key`, or None when missing or unreadable."""
        ...

    async def set(self, key: str, record: VideoRecord) -> None:
        """Replace the whole value stored under `key`."""
        ...

    async def list(self) -> List[VideoRecord]:
        """Every readable record, in no particular order."""
        ...


def _parse_record(raw: Any, key: str) -> Optional[VideoRecord]:
    try:
        if isinstance(raw, (str, bytes)):
            raw = json.loads(raw)
        return VideoRecord.model_validate(raw)
    except (ValueError, TypeError, ValidationError) as e:
        # json.JSONDecodeError is a ValueError
        logger.warning(f"[Storage] Skipping unreadable record {key}: {e}")
        return None


class FileVideoStore:
    """
    Records as pretty-printed JSON files, one per video id.

    Writes go to a temporary file in the same directory which is then
    renamed over the target, so a reader sees either the old or the new
    record, never a partial one.
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY_RE.match(key):
            raise ValueError(f"Invalid record key: {key!r}")
        return self.data_dir / f"{key}{RECORD_FILE_SUFFIX}"

    async def get(self, key: str) -> Optional[VideoRecord]:
        try:
            raw = self._path(key).read_text(encoding="utf-8")
        except (OSError, ValueError):
            return None
        return _parse_record(raw, key)

    async def set(self, key: str, record: VideoRecord) -> None:
        target = self._path(key)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        content = json.dumps(record.to_document(), indent=2, ensure_ascii=False)

        fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, target)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    async def list(self) -> List[VideoRecord]:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        keys = [
            path.name[: -len(RECORD_FILE_SUFFIX)]
            for path in self.data_dir.iterdir()
            if path.name.endswith(RECORD_FILE_SUFFIX) and not path.name.startswith(".")
        ]
        results = await asyncio.gather(*(self.get(key) for key in keys))
        return [record for record in results if record is not None]


class MongoVideoStore:
    """
    Records as MongoDB documents.

    Schema: the record's camelCase JSON with the video id stored as `_id`.
    `set` is a full `replace_one` upsert; fields are never patched in place.
    """

    def __init__(self, collection):
        self.collection = collection

    @staticmethod
    def _to_mongo(key: str, record: VideoRecord) -> Dict[str, Any]:
        document = record.to_document()
        document.pop("id", None)
        document["_id"] = key
        return document

    async def get(self, key: str) -> Optional[VideoRecord]:
        doc = await self.collection.find_one({"_id": key})
        if not doc:
            return None
        return _parse_record(doc, key)

    async def set(self, key: str, record: VideoRecord) -> None:
        await self.collection.replace_one({"_id": key}, self._to_mongo(key, record), upsert=True)

    async def list(self) -> List[VideoRecord]:
        records = []
        async for doc in self.collection.find({}):
            record = _parse_record(doc, str(doc.get("_id")))
            if record is not None:
                records.append(record)
        return records


@lru_cache(maxsize=1)
def get_store() -> VideoStore:
    """
    Build the configured store once per process.

    STORAGE_BACKEND=auto uses MongoDB when DATABASE_URL is set and the
    local data directory otherwise.
    """
    settings = get_settings()
    backend = settings.resolved_storage_backend

    if backend == StorageBackend.MONGO:
        from ..db.mongo import get_collection

        logger.info(f"[Storage] Using MongoDB collection '{settings.mongo_collection}'")
        return MongoVideoStore(get_collection())

    logger.info(f"[Storage] Using local directory '{settings.data_dir}'")
    return FileVideoStore(settings.data_dir)

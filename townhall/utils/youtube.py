import re
from typing import Optional

from ..constants import VIDEO_ID_LENGTH

# `v=<id>` query parameter or a `/<id>` path segment (youtu.be, /embed/, /shorts/)
VIDEO_ID_PATTERN = re.compile(r"(?:v=|/)([0-9A-Za-z_-]{%d})" % VIDEO_ID_LENGTH)


def extract_video_id(youtube_url: str) -> Optional[str]:
    if not isinstance(youtube_url, str):
        return None
    match = VIDEO_ID_PATTERN.search(youtube_url)
    if match:
        return match.group(1)
    return None


def build_watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"

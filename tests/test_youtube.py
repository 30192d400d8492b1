import pytest

from townhall.utils.youtube import extract_video_id, build_watch_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://youtu.be/abc12345678", "abc12345678"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/a-b_c-d_e-f", "a-b_c-d_e-f"),
        ("https://m.youtube.com/watch?feature=share&v=Zz9_-Zz9_-Z", "Zz9_-Zz9_-Z"),
    ],
)
def test_extract_video_id(url, expected):
    video_id = extract_video_id(url)
    assert video_id == expected
    assert len(video_id) == 11


@pytest.mark.parametrize("url", ["not a url", "https://youtu.be/short", "", "v=abc"])
def test_extract_video_id_rejects_urls_without_id(url):
    assert extract_video_id(url) is None


def test_extract_video_id_ignores_non_strings():
    assert extract_video_id(None) is None
    assert extract_video_id(12345678901) is None


def test_build_watch_url():
    assert build_watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

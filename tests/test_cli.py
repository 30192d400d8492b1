import pytest

from townhall.__main__ import build_parser, main


def test_parser_commands():
    parser = build_parser()
    args = parser.parse_args(["ingest", "https://youtu.be/abc12345678", "https://youtu.be/def12345678"])
    assert args.urls == ["https://youtu.be/abc12345678", "https://youtu.be/def12345678"]

    args = parser.parse_args(["report", "--category", "Real Estate"])
    assert args.category == "Real Estate"
    assert args.output is None

    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_report_on_empty_store_exits_with_error(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))

    assert main(["report"]) == 1
    assert "No analyzed videos found." in capsys.readouterr().err


def test_analyze_unknown_video_exits_with_error(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))

    assert main(["analyze", "abc12345678"]) == 1
    assert "(404)" in capsys.readouterr().err


def test_serve_runs_the_api_with_uvicorn(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    calls = []
    monkeypatch.setattr("townhall.__main__.uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

    assert main(["serve", "--port", "9000"]) == 0

    assert calls == [("townhall.api:app", {"host": "127.0.0.1", "port": 9000, "reload": False, "log_level": "info"})]

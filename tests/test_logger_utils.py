# tests/test_logger_utils.py

import io

import pytest
from weighted_autocompleter.utils.logger_utils import Log


def test_write_to_stream_and_file(tmp_path):
    path = tmp_path / "logs" / "run.log"
    out = io.StringIO()
    log = Log(path=str(path), use_color=False, stream=out)
    log.info("built trie")
    log.error("boom")
    text = out.getvalue()
    assert "INFO    | built trie" in text
    assert "ERROR   | boom" in text
    assert path.read_text(encoding="utf-8").count("\n") == 2


def test_level_filters():
    out = io.StringIO()
    log = Log(use_color=False, stream=out, level="warning")
    log.debug("hidden")
    log.info("hidden too")
    log.warning("shown")
    assert "hidden" not in out.getvalue()
    assert "shown" in out.getvalue()


def test_color_codes():
    out = io.StringIO()
    Log(stream=out).warning("careful")
    assert out.getvalue().startswith(Log.COLORS["WARNING"])


def test_unknown_level():
    with pytest.raises(ValueError):
        Log(level="LOUD")


def test_time_block_records_elapsed(capsys):
    with Log.time_block("trie build") as t:
        sum(range(1000))
    assert t.elapsed >= 0
    assert "trie build done" in capsys.readouterr().out


def test_metric_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "metrics.log"
    monkeypatch.setattr(Log, "metric_path", str(path))
    Log.metric("queries", 10)
    assert "queries: 10" in path.read_text(encoding="utf-8")
    assert "queries: 10" in capsys.readouterr().out

import json

from click.testing import CliRunner

from gesture_import.cli import main as import_main
from gesture_inspect.cli import main as inspect_main


def test_decode_prints_json(swipe_store):
    r = CliRunner().invoke(import_main, ["decode", str(swipe_store)])
    assert r.exit_code == 0, r.output
    (gesture,) = json.loads(r.output)
    assert gesture["id"] == "swipe"
    assert gesture["stroke_count"] == 1
    assert gesture["point_count"] == 2
    assert gesture["strokes"] == [[[0.0, 0.0], [300.0, 150.0]]]


def test_decode_missing_file_is_empty(tmp_path):
    r = CliRunner().invoke(import_main, ["decode", str(tmp_path / "nope.bin")])
    assert r.exit_code == 0
    assert json.loads(r.output) == []


def test_decode_default_path(swipe_store, monkeypatch):
    monkeypatch.setenv("GESTURE_STORE_PATH", str(swipe_store))
    r = CliRunner().invoke(import_main, ["decode"])
    assert r.exit_code == 0, r.output
    assert json.loads(r.output)[0]["id"] == "swipe"


def test_decode_debug_trace(swipe_store):
    r = CliRunner().invoke(import_main, ["decode", "--debug", str(swipe_store)])
    assert r.exit_code == 0
    assert "Header data: version=1 entries=1" in r.output


def test_decode_truncated_fails_closed(swipe_store):
    swipe_store.write_bytes(swipe_store.read_bytes()[:-1])
    r = CliRunner().invoke(import_main, ["decode", str(swipe_store)])
    assert r.exit_code == 1
    assert r.output.startswith("FATAL:")


def test_export(swipe_store, tmp_path):
    out = tmp_path / "out"
    r = CliRunner().invoke(import_main, ["export", str(swipe_store), str(out)])
    assert r.exit_code == 0, r.output
    assert "Gestures: 1" in r.output
    manifest = json.loads((out / "manifest.json").read_text(encoding="utf-8"))
    assert len(manifest["source_hash"]) == 64


def test_inspect_store(swipe_store):
    r = CliRunner().invoke(inspect_main, ["store", str(swipe_store)])
    assert r.exit_code == 0
    assert json.loads(r.output)["status"] == "PASS"


def test_inspect_store_fail(tmp_path):
    r = CliRunner().invoke(inspect_main, ["store", str(tmp_path / "nope.bin")])
    assert r.exit_code == 1
    assert json.loads(r.output)["status"] == "FAIL"

import pytest

from gesture_import.resources import default_store_path


def test_env_path_wins(tmp_path, monkeypatch):
    store = tmp_path / "custom.bin"
    store.write_bytes(b"\x00\x01\x00\x00\x00\x00")
    monkeypatch.setenv("GESTURE_STORE_PATH", str(store))
    monkeypatch.chdir(tmp_path)
    assert default_store_path() == store


def test_cwd_gestures_bin(tmp_path, monkeypatch):
    monkeypatch.delenv("GESTURE_STORE_PATH", raising=False)
    (tmp_path / "gestures.bin").write_bytes(b"")
    monkeypatch.chdir(tmp_path)
    assert default_store_path() == tmp_path / "gestures.bin"


def test_missing_env_target_falls_through(tmp_path, monkeypatch):
    monkeypatch.setenv("GESTURE_STORE_PATH", str(tmp_path / "missing.bin"))
    (tmp_path / "gestures.bin").write_bytes(b"")
    monkeypatch.chdir(tmp_path)
    assert default_store_path() == tmp_path / "gestures.bin"


def test_absent_returns_none(tmp_path, monkeypatch):
    monkeypatch.delenv("GESTURE_STORE_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    with pytest.warns(UserWarning, match="File not found"):
        assert default_store_path() is None

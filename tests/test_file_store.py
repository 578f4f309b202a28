from feedfilter.tools.file_store import FileStore


def test_rotation_keeps_tail(tmp_path):
    log = tmp_path / "audit.log"
    log.write_text("".join(f"line {i}\n" for i in range(100)), encoding="utf-8")
    store = FileStore(base_dir=str(tmp_path))
    assert store.rotate_log_if_needed(str(log), max_size_mb=0.0001, keep_lines=10)
    lines = log.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("[LOG ROTATED] kept 10 of 100")
    assert lines[1:] == [f"line {i}" for i in range(90, 100)]


def test_small_or_missing_log_not_rotated(tmp_path):
    store = FileStore(base_dir=str(tmp_path))
    assert not store.rotate_log_if_needed(str(tmp_path / "missing.log"))
    log = tmp_path / "audit.log"
    log.write_text("one\n", encoding="utf-8")
    assert not store.rotate_log_if_needed(str(log))
    assert log.read_text(encoding="utf-8") == "one\n"


def test_paths_follow_env(tmp_path, monkeypatch):
    monkeypatch.setenv("FF_CONFIG_PATH", str(tmp_path / "c.json"))
    monkeypatch.setenv("FF_LOG_PATH", str(tmp_path / "l.log"))
    store = FileStore()
    assert store.get_config_path() == str(tmp_path / "c.json")
    assert store.get_log_path() == str(tmp_path / "l.log")

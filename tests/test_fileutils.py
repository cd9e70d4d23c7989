import os

from fogos.fileutils import ln_main, mkdir_main, rm_main


def test_ln_creates_link(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "old").write_text("data")
    assert ln_main(["old", "new"]) == 0
    assert os.path.samefile("old", "new")
    assert (tmp_path / "new").read_text() == "data"


def test_ln_usage(capsys):
    assert ln_main(["only"]) == 1
    assert capsys.readouterr().err == "Usage: ln old new\n"


def test_ln_failure_reports(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert ln_main(["x", "y"]) == 0
    assert capsys.readouterr().err == "link x y: failed\n"
    assert not (tmp_path / "y").exists()


def test_mkdir_creates(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert mkdir_main(["a", "b"]) == 0
    assert (tmp_path / "a").is_dir()
    assert (tmp_path / "b").is_dir()


def test_mkdir_stops_at_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a").mkdir()
    assert mkdir_main(["a", "b"]) == 0
    assert capsys.readouterr().err == "mkdir: a failed to create\n"
    assert not (tmp_path / "b").exists()


def test_mkdir_usage(capsys):
    assert mkdir_main([]) == 1
    assert capsys.readouterr().err == "Usage: mkdir files...\n"


def test_rm_removes_files_and_empty_dirs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "f").write_text("x")
    (tmp_path / "d").mkdir()
    assert rm_main(["f", "d"]) == 0
    assert sorted(os.listdir(tmp_path)) == []


def test_rm_stops_at_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "keep").write_text("x")
    assert rm_main(["missing", "keep"]) == 0
    assert capsys.readouterr().err == "rm: missing failed to delete\n"
    assert (tmp_path / "keep").exists()


def test_rm_usage(capsys):
    assert rm_main([]) == 1
    assert capsys.readouterr().err == "Usage: rm files...\n"
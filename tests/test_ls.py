import io

from fogos.ls import DIRSIZ, Color, fmtname, help_text, ls, main


def test_fmtname_pads_and_strips_directories():
    assert fmtname("a/b/cat") == fmtname("cat")
    assert fmtname("cat") == "cat".ljust(DIRSIZ)
    assert len(fmtname("x")) == DIRSIZ


def test_fmtname_long_names_unchanged():
    assert fmtname("dir/12345678901234") == "12345678901234"
    assert fmtname("123456789012345") == "123456789012345"


def test_fmtname_trailing_slash():
    assert fmtname("dir/") == " " * DIRSIZ


def test_help_text():
    text = help_text()
    assert text.startswith("LS MANUAL PAGE\n")
    assert "-rand: prints files in random colors\n" in text


def test_file_default(tmp_path):
    p = tmp_path / "f.txt"
    p.write_text("hello")
    out = io.StringIO()
    ls(str(p), "-", out)
    assert out.getvalue() == f"\033[{int(Color.CYAN)}m{fmtname('f.txt')} \033[0m\n"


def test_file_size(tmp_path):
    p = tmp_path / "f.txt"
    p.write_text("hello")
    out = io.StringIO()
    ls(str(p), "-sz", out)
    assert out.getvalue() == f"\033[{int(Color.CYAN)}m{fmtname('f.txt')} 5\033[0m\n"


def test_file_rand_color_in_set(tmp_path):
    p = tmp_path / "f"
    p.write_text("x")
    out = io.StringIO()
    ls(str(p), "-rand", out)
    allowed = {Color.BLUE, Color.RED, Color.GREEN, Color.MAGENTA, Color.ORANGE}
    assert any(out.getvalue().startswith(f"\033[{int(c)}m") for c in allowed)


def test_file_with_dir_only_flag_is_invalid(tmp_path):
    p = tmp_path / "f"
    p.write_text("x")
    out = io.StringIO()
    ls(str(p), "-fun", out)
    assert out.getvalue() == "Invalid Flag\n" + help_text()


def test_dir_default(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    out = io.StringIO()
    ls(str(tmp_path), "-", out)
    text = out.getvalue()
    assert f"\033[{int(Color.BLUE)}m{fmtname('.')} \033[0m\n" in text
    assert f"{fmtname('a.txt')}\n" in text
    assert "Invalid Flag" not in text


def test_dir_size_colors(tmp_path):
    (tmp_path / "small").write_bytes(b"a" * 500)
    (tmp_path / "empty").write_bytes(b"")
    out = io.StringIO()
    ls(str(tmp_path), "-sz", out)
    text = out.getvalue()
    assert f"\033[{int(Color.BLUE)}m{fmtname('small')} 500\033[0m\n" in text
    assert f"\033[{int(Color.WHITE)}m{fmtname('empty')} 0\033[0m\n" in text


def test_dir_columns_end_with_newline(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    out = io.StringIO()
    ls(str(tmp_path), "-c", out)
    text = out.getvalue()
    assert text.endswith("\n")
    assert fmtname("a.txt") in text
    assert "Invalid Flag" not in text


def test_missing_path(tmp_path, capsys):
    out = io.StringIO()
    missing = str(tmp_path / "nope")
    ls(missing, "-", out)
    assert out.getvalue() == ""
    assert capsys.readouterr().err == f"ls: cannot open {missing}\n"


def test_main_too_many_flags(capsys):
    assert main(["-l", "-t"]) == 0
    assert capsys.readouterr().out == "Too many flags detected. Please use one flag at a time\n"


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == help_text()


def test_main_no_args_lists_cwd(tmp_path, monkeypatch, capsys):
    (tmp_path / "f").write_text("x")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert f"{fmtname('f')}\n" in capsys.readouterr().out


def test_main_flag_with_path(tmp_path, monkeypatch, capsys):
    (tmp_path / "f").write_text("abc")
    monkeypatch.chdir(tmp_path)
    assert main(["-sz", "f"]) == 0
    assert capsys.readouterr().out == f"\033[{int(Color.CYAN)}m{fmtname('f')} 3\033[0m\n"


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["missing"]) == 0
    assert capsys.readouterr().err == "ls: cannot open missing\n"
import errno
import os
import stat

import pytest

from pipexpy.cli import (
    PipexError,
    candidate_paths,
    main,
    run_pipeline,
    split_command,
)


@pytest.fixture
def env(tmp_path):
    return {"PWD": str(tmp_path), "PATH": os.environ.get("PATH", "/usr/bin:/bin")}


def test_split_command_drops_repeated_spaces():
    assert split_command("  cat   -n ") == ["cat", "-n"]


def test_split_command_ignores_quotes():
    assert split_command('grep "a b"') == ["grep", '"a', 'b"']


def test_candidate_paths_order(tmp_path):
    workdir = tmp_path / "work"
    assert candidate_paths("ls", {"PWD": str(workdir)}) == [
        f"{workdir}/ls",
        "/bin/ls",
        "/usr/bin/ls",
        "/usr/local/bin/ls",
        "/sbin/ls",
        "/usr/sbin/ls",
    ]


def test_candidate_paths_without_pwd_starts_with_bin():
    paths = candidate_paths("ls", {})
    assert paths[0] == "/bin/ls"
    assert len(paths) == 5


def test_cat_cat_round_trip(tmp_path, env):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_bytes(b"first line\nsecond line\n")
    status = run_pipeline(str(infile), "cat", "cat", str(outfile), env)
    assert status == 0
    assert outfile.read_bytes() == infile.read_bytes()


def test_arguments_are_passed(tmp_path, env):
    infile = tmp_path / "in.txt"
    outfile = tmp_path / "out.txt"
    infile.write_text("one\ntwo\n")
    run_pipeline(str(infile), "cat", "wc -l", str(outfile), env)
    assert outfile.read_text().strip() == "2"


def test_program_found_in_working_directory(tmp_path, env):
    script = tmp_path / "shout"
    script.write_text("#!/bin/sh\necho local\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    infile = tmp_path / "in.txt"
    infile.write_text("")
    outfile = tmp_path / "out.txt"
    run_pipeline(str(infile), "cat", "shout", str(outfile), env)
    assert outfile.read_text() == "local\n"


def test_missing_input_reports_and_continues(tmp_path, env, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(tmp_path / "absent"), "cat", "cat", str(outfile), env)
    assert status == 0
    assert outfile.read_bytes() == b""
    assert f"file1: {os.strerror(errno.ENOENT)}" in capsys.readouterr().err


def test_input_directory_reported(tmp_path, env, capsys):
    outfile = tmp_path / "out.txt"
    run_pipeline(str(tmp_path), "cat", "cat", str(outfile), env)
    assert f"file1: {os.strerror(errno.EISDIR)}" in capsys.readouterr().err


def test_unknown_first_command_reported(tmp_path, env, capsys):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    run_pipeline(str(infile), "no-such-program-xyz", "cat", str(outfile), env)
    assert outfile.read_bytes() == b""
    assert "no-such-program-xyz" in capsys.readouterr().err


def test_output_directory_raises(tmp_path, env):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    with pytest.raises(PipexError) as info:
        run_pipeline(str(infile), "cat", "cat", str(tmp_path), env)
    assert info.value.code == errno.EISDIR
    assert info.value.subject == "file2"


def test_unknown_second_command_raises(tmp_path, env):
    infile = tmp_path / "in.txt"
    infile.write_text("data\n")
    outfile = tmp_path / "out.txt"
    with pytest.raises(PipexError) as info:
        run_pipeline(str(infile), "cat", "no-such-program-xyz", str(outfile), env)
    assert info.value.code == errno.ENOENT
    assert info.value.subject == "no-such-program-xyz"
    assert outfile.exists()


def test_main_wrong_argument_count(capsys):
    assert main(["only", "three", "args"]) == errno.EINVAL
    assert "Please provide file1 cmd1 cmd2 file2" in capsys.readouterr().err


def test_main_success(tmp_path, monkeypatch):
    monkeypatch.setenv("PWD", str(tmp_path))
    infile = tmp_path / "in.txt"
    infile.write_text("payload\n")
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "payload\n"


def test_main_reports_error_code(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("PWD", str(tmp_path))
    infile = tmp_path / "in.txt"
    infile.write_text("payload\n")
    assert main([str(infile), "cat", "cat", str(tmp_path)]) == errno.EISDIR
    assert "file2" in capsys.readouterr().err
"""Integration tests running the dirtree command in a subprocess.

These cover the process-level behavior: output on stdout, exit codes and error
messages on stderr, and early termination of the reader of a pipe.
"""

import os
import subprocess
import sys

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(*args, cwd=None):
    return subprocess.run(
        [sys.executable, "-m", "dirtree.cli.main", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=cwd,
    )


@pytest.fixture
def temp_project(tmp_path):
    base_dir = tmp_path / "project"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "docs").mkdir()
    (base_dir / "src" / "main.py").write_text("def main():\n    pass\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "docs" / "README.md").write_text("# Test Project\n")
    (base_dir / ".gitignore").write_text("*.pyc\n")
    return base_dir


def test_default_output(temp_project):
    result = run_cli("-S", cwd=temp_project)

    assert result.returncode == 0
    assert result.stdout == (
        ".\n"
        "├───docs\n"
        "│   └───README.md\n"
        "└───src\n"
        "    ├───main.py\n"
        "    └───utils\n"
        "        └───helpers.py\n"
    )
    assert result.stderr == ""


def test_entry_count(temp_project):
    result = run_cli("-a", str(temp_project))

    entries = sum(len(dirs) + len(files) for _, dirs, files in os.walk(temp_project))
    assert result.returncode == 0
    assert len(result.stdout.splitlines()) == entries + 1


def test_ascii_and_depth(temp_project):
    result = run_cli("-A", "-S", "-L", "1", str(temp_project))

    assert result.returncode == 0
    assert result.stdout.splitlines() == [str(temp_project), "|---docs", "\\---src"]


def test_summary_to_stderr(temp_project):
    result = run_cli("-s", "stderr", str(temp_project))

    assert result.returncode == 0
    assert result.stderr == "Directories: 3\nFiles: 3\n"


def test_output_file(temp_project, tmp_path):
    output = tmp_path / "tree.txt"
    result = run_cli("-S", "-o", str(output), str(temp_project))

    assert result.returncode == 0
    assert result.stdout == ""
    assert output.read_text(encoding="utf-8").splitlines()[1] == "├───docs"


def test_nonexistent_directory(tmp_path):
    missing = tmp_path / "missing"
    result = run_cli(str(missing))

    assert result.returncode == 1
    assert result.stdout == ""
    assert result.stderr.startswith("Error: Cannot read")
    assert str(missing) in result.stderr


@pytest.mark.skipif(sys.platform == "win32" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_permission_denied(temp_project):
    locked = temp_project / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        result = run_cli(str(temp_project))
    finally:
        locked.chmod(0o755)

    assert result.returncode == 126
    assert result.stdout == ""
    assert "Permission denied" in result.stderr


def test_invalid_depth(temp_project):
    result = run_cli("-L", "-1", str(temp_project))

    assert result.returncode == 2
    assert "invalid depth" in result.stderr


def test_version():
    result = run_cli("--version")

    assert result.returncode == 0
    assert result.stdout.startswith("dirtree ")


@pytest.mark.skipif(sys.platform == "win32", reason="SIGPIPE is not available on Windows")
def test_broken_pipe(tmp_path):
    wide = tmp_path / "wide"
    wide.mkdir()
    for index in range(5000):
        (wide / f"file_{index:05d}.txt").touch()

    process = subprocess.Popen(
        [sys.executable, "-m", "dirtree.cli.main", str(wide)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    assert process.stdout is not None
    process.stdout.readline()
    process.stdout.close()
    _, stderr = process.communicate(timeout=30)

    assert process.returncode in (0, 141)
    assert b"Traceback" not in stderr


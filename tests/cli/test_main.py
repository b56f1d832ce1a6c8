"""Unit tests for the interactive run and the CLI entry point."""

import contextlib
import io
import locale
import os
from unittest.mock import patch

import pytest

from repotree.cli.main import main, run, set_collation_locale
from repotree.cli.prompts import Prompter
from repotree.cli.safe_writer import SafeWriter
from repotree.file_system_tree.file_system import LocalFileSystem
from repotree.icons import IconSet


class ScriptedPrompter(Prompter):
    """Prompter answering from fixed values and recording the questions asked."""

    def __init__(self, path, confirmations=None):
        self._path = path
        self._confirmations = dict(confirmations or {})
        self.questions = []

    def confirm(self, message, default):
        self.questions.append(message)
        return self._confirmations.get(message, default)

    def path(self, message, default):
        self.questions.append(message)
        return self._path


GIT_QUESTION = "Do you want to ignore '.git' folder?"
GITIGNORE_QUESTION = "Do you want to ignore '.gitignore' content?"


def run_session(prompter, **kwargs):
    lines = []
    run(prompter, LocalFileSystem(), lines.append, **kwargs)
    return lines


@pytest.fixture(autouse=True)
def keep_locale():
    """Keep main() from switching the test process to the user's collation."""
    with patch("repotree.cli.main.locale.setlocale"):
        yield


def test_minimal_tree(tmp_path):
    (tmp_path / "dirA").mkdir()
    (tmp_path / "file1.txt").touch()
    prompter = ScriptedPrompter(str(tmp_path))
    assert run_session(prompter) == ["./", "├── 📁 dirA", "└── 📄 file1.txt"]
    assert prompter.questions == ["Enter the path of the repository:"]


def test_missing_path(tmp_path):
    lines = run_session(ScriptedPrompter(str(tmp_path / "missing")))
    assert lines == ["Path does not exist"]


def test_path_is_a_file(tmp_path):
    (tmp_path / "file.txt").touch()
    lines = run_session(ScriptedPrompter(str(tmp_path / "file.txt")))
    assert lines == ["Path is not a directory"]


def test_git_excluded_when_confirmed(project_tree):
    prompter = ScriptedPrompter(str(project_tree), {GIT_QUESTION: True, GITIGNORE_QUESTION: False})
    lines = run_session(prompter)
    assert not any(line.endswith(" .git") for line in lines)
    assert prompter.questions == ["Enter the path of the repository:", GIT_QUESTION, GITIGNORE_QUESTION]


def test_git_kept_when_declined(project_tree):
    prompter = ScriptedPrompter(str(project_tree), {GIT_QUESTION: False, GITIGNORE_QUESTION: False})
    lines = run_session(prompter)
    assert "├── 📁 .git" in lines
    assert "│   └── 📄 HEAD" in lines


def test_gitignore_applied_when_confirmed(project_tree):
    prompter = ScriptedPrompter(str(project_tree), {GIT_QUESTION: True, GITIGNORE_QUESTION: True})
    lines = run_session(prompter)
    assert lines == [
        "node_modules",
        "./",
        "├── 📁 docs",
        "├── 📁 src",
        "│   ├── 📁 utils",
        "│   │   └── 📄 helpers.py",
        "│   └── 📄 main.py",
        "├── 📄 .gitignore",
        "├── 🔑 LICENSE",
        "└── ℹ️ README.md",
    ]


def test_gitignore_ignored_when_declined(project_tree):
    prompter = ScriptedPrompter(str(project_tree), {GIT_QUESTION: True, GITIGNORE_QUESTION: False})
    lines = run_session(prompter)
    assert "├── 📁 node_modules" in lines
    assert "node_modules" not in lines


def test_no_questions_without_git_files(tmp_path):
    (tmp_path / "a.txt").touch()
    prompter = ScriptedPrompter(str(tmp_path))
    run_session(prompter)
    assert prompter.questions == ["Enter the path of the repository:"]


def test_trailing_slash_path(project_tree):
    prompter = ScriptedPrompter(str(project_tree) + "/", {GITIGNORE_QUESTION: True})
    lines = run_session(prompter)
    assert lines[0] == "node_modules"


def test_custom_icons(tmp_path):
    (tmp_path / "dir").mkdir()
    (tmp_path / "README.md").touch()
    icons = IconSet(directory="D", file="F", readme="R", license="L")
    assert run_session(ScriptedPrompter(str(tmp_path)), icons=icons) == ["./", "├── D dir", "└── R README.md"]


def test_unreadable_subdirectory_propagates(tmp_path):
    (tmp_path / "locked").mkdir()

    class DeniedFileSystem(LocalFileSystem):
        def list_children(self, path):
            if path.endswith("locked"):
                raise PermissionError(f"Permission denied: '{path}'")
            return super().list_children(path)

    with pytest.raises(PermissionError):
        run(ScriptedPrompter(str(tmp_path)), DeniedFileSystem(), [].append)


@pytest.fixture
def undecodable_name(tmp_path):
    """Create a file whose name is not valid UTF-8, or skip where the filesystem refuses it."""
    raw = os.path.join(os.fsencode(tmp_path), b"caf\xe9.txt")
    try:
        with open(raw, "wb"):
            pass
    except OSError:
        pytest.skip("Filesystem rejects non-UTF-8 file names")
    return os.fsdecode(b"caf\xe9.txt")


def test_undecodable_file_name_is_written_as_original_bytes(tmp_path, undecodable_name):
    (tmp_path / "a.txt").touch()
    read_fd, write_fd = os.pipe()
    with os.fdopen(read_fd, "rb") as reader:
        with os.fdopen(write_fd, "wb") as sink, SafeWriter(sink.fileno()) as writer:
            run(ScriptedPrompter(str(tmp_path)), LocalFileSystem(), writer.write_line)
        output = reader.read()
    assert output == "./\n├── 📄 a.txt\n└── 📄 ".encode("utf-8") + b"caf\xe9.txt\n"


def test_gitignore_with_invalid_utf8_still_applies(tmp_path):
    (tmp_path / "build").mkdir()
    (tmp_path / "main.py").touch()
    (tmp_path / ".gitignore").write_bytes(b"# caf\xe9\nbuild/\n")
    lines = run_session(ScriptedPrompter(str(tmp_path), {GITIGNORE_QUESTION: True}))
    assert lines == ["build", "./", "├── 📄 .gitignore", "└── 📄 main.py"]


def test_set_collation_locale_ignores_unknown_locale():
    with patch("repotree.cli.main.locale.setlocale", side_effect=locale.Error("unsupported locale setting")):
        assert set_collation_locale("xx_XX.nope") is None


def test_set_collation_locale_uses_lc_collate():
    with patch("repotree.cli.main.locale.setlocale", return_value="C") as mock_setlocale:
        assert set_collation_locale() == "C"
    mock_setlocale.assert_called_once_with(locale.LC_COLLATE, "")


@pytest.fixture
def devnull():
    """A real file whose descriptor main() can take once it replaces sys.stdout."""
    with open(os.devnull, "w") as f:
        yield f


def test_main_success(devnull):
    with patch("sys.stdout", devnull), patch("repotree.cli.main.SafeWriter") as mock_writer, patch(
        "repotree.cli.main.run"
    ) as mock_run, patch("sys.exit") as mock_exit:
        main()
    mock_writer.assert_called_once_with(devnull.fileno())
    mock_run.assert_called_once()
    mock_exit.assert_not_called()


@pytest.mark.parametrize("error", [KeyboardInterrupt(), EOFError()])
def test_main_interrupted(devnull, error):
    with patch("sys.stdout", devnull), patch("repotree.cli.main.SafeWriter"), patch(
        "repotree.cli.main.run", side_effect=error
    ), patch("sys.exit") as mock_exit:
        with contextlib.redirect_stderr(io.StringIO()):
            main()
    mock_exit.assert_called_once_with(130)


def test_main_runtime_error(devnull):
    stderr = io.StringIO()
    with patch("sys.stdout", devnull), patch("repotree.cli.main.SafeWriter"), patch(
        "repotree.cli.main.run", side_effect=PermissionError("Permission denied: 'locked'")
    ), patch("sys.exit") as mock_exit:
        with contextlib.redirect_stderr(stderr):
            main()
    assert "Error: Permission denied: 'locked'" in stderr.getvalue()
    mock_exit.assert_called_once_with(1)


def test_main_broken_pipe(devnull):
    with patch("sys.stdout", devnull), patch("repotree.cli.main.SafeWriter"), patch(
        "repotree.cli.main.run", side_effect=BrokenPipeError()
    ), patch("repotree.cli.main.os.dup2") as mock_dup2, patch(
        "repotree.cli.main.os.open", return_value=99
    ), patch("sys.exit") as mock_exit:
        main()
    mock_dup2.assert_called_once_with(99, devnull.fileno())
    mock_exit.assert_called_once_with(141)

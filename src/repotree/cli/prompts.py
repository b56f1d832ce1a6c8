"""Interactive prompts for the repotree command line.

Prompting goes through the Prompter interface so the interactive run can be
driven by scripted answers in tests. ConsolePrompter asks on the terminal with
input() and, where the readline module is available, offers tab completion of
directory names while the start path is being typed.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from repotree.file_system_tree.file_system import FileSystem, LocalFileSystem
from repotree.paths import join_path

try:
    import readline
except ImportError:  # Windows and some embedded builds ship without readline
    readline = None  # type: ignore[assignment]

CURRENT_DIRECTORY = "./"
YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


class Prompter(ABC):
    """Source of answers for the interactive run."""

    @abstractmethod
    def confirm(self, message: str, default: bool) -> bool:
        """Ask a yes/no question and return the answer."""

    @abstractmethod
    def path(self, message: str, default: str) -> str:
        """Ask for a filesystem path and return it."""


def suggest_directories(partial: str, file_system: FileSystem) -> List[str]:
    """Complete the last segment of a partially typed path to subdirectory names.

    The text before the last ``/`` names the directory to look in (relative to
    the working directory unless it starts with ``/``); the text after it is the
    prefix being completed. Suggestions keep the typed parent and end with ``/``
    so completion can continue into the next level.

    Args:
        partial: The path typed so far.
        file_system: Filesystem used to list and classify entries.

    Returns:
        Sorted suggestions. ``./`` comes first when nothing (or ``./``) has been
        typed yet. An unreadable or missing parent yields no suggestions.

    Example:
        >>> suggest_directories("/definitely/not/here/x", LocalFileSystem())
        []
    """
    parent, _, last = partial.rpartition("/")
    if partial.startswith("/"):
        directory = parent or "/"
        typed_parent = directory if directory == "/" else parent + "/"
    else:
        directory = parent or "."
        typed_parent = parent + "/" if parent else ""

    try:
        entries = file_system.list_children(directory)
    except OSError:
        return []

    suggestions = sorted(
        typed_parent + entry + "/"
        for entry in entries
        if entry.startswith(last) and file_system.is_directory(join_path(directory, entry))
    )
    if partial in ("", CURRENT_DIRECTORY):
        suggestions.insert(0, CURRENT_DIRECTORY)
    return suggestions


class ConsolePrompter(Prompter):
    """Prompter that asks on the terminal.

    Attributes:
        file_system (FileSystem): Filesystem used for path completion.
    """

    def __init__(
        self,
        file_system: Optional[FileSystem] = None,
        input_func: Callable[[str], str] = input,
    ) -> None:
        """Initialize the prompter.

        Args:
            file_system: Filesystem used for path completion. Defaults to LocalFileSystem.
            input_func: Function that shows a prompt and returns the typed line.
                Defaults to the builtin input().
        """
        self.file_system = file_system if file_system is not None else LocalFileSystem()
        self._input = input_func

    def confirm(self, message: str, default: bool) -> bool:
        """Ask a yes/no question until a recognizable answer is given.

        An empty answer selects ``default``.

        Raises:
            EOFError: If input ends before an answer is given.
        """
        hint = "(Y/n)" if default else "(y/N)"
        while True:
            answer = self._input(f"? {message} {hint} ").strip().lower()
            if not answer:
                return default
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False

    def path(self, message: str, default: str) -> str:
        """Ask for a path with directory completion; an empty answer selects ``default``.

        Raises:
            EOFError: If input ends before an answer is given.
        """
        with _ReadlineCompletion(self._complete):
            answer = self._input(f"? {message} ({default}) ").strip()
        return answer or default

    def _complete(self, text: str, state: int) -> Optional[str]:
        """readline completer: return the ``state``-th suggestion for ``text``."""
        suggestions = suggest_directories(text, self.file_system)
        if state < len(suggestions):
            return suggestions[state]
        return None


class _ReadlineCompletion:
    """Context manager that installs a readline completer for the duration of one prompt."""

    def __init__(self, completer: Callable[[str, int], Optional[str]]) -> None:
        self.completer = completer
        self._previous_completer: Optional[Callable[[str, int], Optional[str]]] = None
        self._previous_delims = ""

    def __enter__(self) -> "_ReadlineCompletion":
        if readline is not None:
            self._previous_completer = readline.get_completer()
            self._previous_delims = readline.get_completer_delims()
            # Complete the whole typed path, not just the text after the last "/"
            readline.set_completer_delims(" \t\n")
            readline.set_completer(self.completer)
            readline.parse_and_bind("tab: complete")
        return self

    def __exit__(self, *exc_info: object) -> None:
        if readline is not None:
            readline.set_completer(self._previous_completer)
            readline.set_completer_delims(self._previous_delims)

"""Command-line interface for repotree.

This module provides the interactive command-line interface for repotree. It
asks for the directory to scan and whether to honor the repository's `.git`
folder and `.gitignore` file, then prints the directory tree in a form that can
be pasted into a README.

Exit Codes:
    0: Successful completion, or the requested path was rejected with a message
    1: Runtime error during execution
    130: Interrupted by Ctrl+C, or input ended at a prompt
    141: Broken pipe on the output

Example:
    $ repotree
    ? Enter the path of the repository: (./) .
    ? Do you want to ignore '.git' folder? (Y/n)
    ./
    ├── 📁 src
    │   └── 📄 main.py
    └── ℹ️ README.md
"""

import locale
import os
import sys
from typing import Callable, Optional

from repotree.cli.prompts import ConsolePrompter, Prompter
from repotree.cli.safe_writer import SafeWriter
from repotree.exceptions import RootNotADirectoryError, RootNotFoundError
from repotree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from repotree.file_system_tree.file_system import FileSystem, LocalFileSystem
from repotree.file_system_tree.file_system_tree import GIT_DIRECTORY, FileSystemTree
from repotree.icons import DEFAULT_ICONS, IconSet
from repotree.paths import join_path
from repotree.tree_renderer import TreeRenderer

GITIGNORE_FILE = ".gitignore"
DEFAULT_PATH = "./"

PATH_PROMPT = "Enter the path of the repository:"
GIT_PROMPT = "Do you want to ignore '.git' folder?"
GITIGNORE_PROMPT = "Do you want to ignore '.gitignore' content?"
PATH_NOT_FOUND_MESSAGE = "Path does not exist"
NOT_A_DIRECTORY_MESSAGE = "Path is not a directory"


def run(
    prompter: Prompter,
    file_system: FileSystem,
    write_line: Callable[[str], None],
    icons: IconSet = DEFAULT_ICONS,
) -> None:
    """Run one interactive tree session.

    Asks for the start directory, offers to skip the root's ``.git`` directory
    and to apply its ``.gitignore`` entries, then writes the rendered tree.
    Entries removed by ``.gitignore`` are written, one name per line, as they
    are encountered during the scan.

    A missing path or a path that is not a directory is reported with a short
    message and the session ends normally.

    Args:
        prompter: Source of answers to the interactive questions.
        file_system: Filesystem to scan.
        write_line: Receives every output line.
        icons: Icons used when rendering. Defaults to DEFAULT_ICONS.

    Raises:
        OSError: If a directory below the root cannot be read.
    """
    root_path = prompter.path(PATH_PROMPT, DEFAULT_PATH)

    tree = FileSystemTree(root_path, file_system=file_system, on_exclude=write_line)
    try:
        tree.validate_root()
    except RootNotFoundError:
        write_line(PATH_NOT_FOUND_MESSAGE)
        return
    except RootNotADirectoryError:
        write_line(NOT_A_DIRECTORY_MESSAGE)
        return

    entries = file_system.list_children(tree.root_path)

    if GIT_DIRECTORY in entries:
        tree.exclude_git = prompter.confirm(GIT_PROMPT, True)

    if GITIGNORE_FILE in entries and prompter.confirm(GITIGNORE_PROMPT, True):
        content = file_system.read_text_file(join_path(tree.root_path, GITIGNORE_FILE))
        tree.exclusion_rules = GitIgnoreExclusionRules.from_text(content)

    nodes = tree.build()
    for line in TreeRenderer(icons).stream_tree_representation(nodes):
        write_line(line)


def set_collation_locale(name: str = "") -> Optional[str]:
    """Adopt the user's collation rules for sorting entry names.

    Args:
        name: Locale name; the empty string selects the environment's locale.

    Returns:
        The locale now in effect for LC_COLLATE, or None if it could not be set.
    """
    try:
        return locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error:
        return None


def main() -> None:
    """Main entry point for the repotree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        130: Interrupted by Ctrl+C, or input ended at a prompt
        141: Broken pipe on the output
    """
    set_collation_locale()
    file_system = LocalFileSystem()

    try:
        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            run(ConsolePrompter(file_system), file_system, safe_writer.write_line)
    except (KeyboardInterrupt, EOFError):
        print(file=sys.stderr)
        sys.exit(130)
    except BrokenPipeError:
        # Keep the interpreter's shutdown flush from hitting the closed pipe again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

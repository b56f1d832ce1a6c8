"""Repository tree rendering utilities.

This package scans a directory, filters it with `.git`/`.gitignore` exclusions
and renders the result as a box-drawing tree suitable for a README.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("repotree")
except PackageNotFoundError:
    __version__ = "unknown"

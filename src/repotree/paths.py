"""Forward-slash path helpers shared by the tree builder and exclusion rules."""


def join_path(parent_path: str, name: str) -> str:
    """Join a child name onto a parent path with a forward slash.

    Example:
        >>> join_path(".", "src")
        './src'
        >>> join_path("/", "etc")
        '/etc'
    """
    if parent_path.endswith("/"):
        return parent_path + name
    return f"{parent_path}/{name}"


def trim_root(root_path: str) -> str:
    """Strip trailing slashes from a root path, keeping a bare ``/`` intact.

    Example:
        >>> trim_root("./")
        '.'
        >>> trim_root("/")
        '/'
    """
    trimmed = root_path.rstrip("/")
    return trimmed or root_path

class RootNotFoundError(FileNotFoundError):
    """
    Exception raised when the directory requested as the tree root does not exist.

    Attributes:
        path (str): The path that was requested as the root.

    Example:
        >>> error = RootNotFoundError("/no/such/dir")
        >>> str(error)
        'Path does not exist: /no/such/dir'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the missing root path.

        Args:
            path (str): The path that was requested as the root.
        """
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class RootNotADirectoryError(NotADirectoryError):
    """
    Exception raised when the path requested as the tree root exists but is not a directory.

    Attributes:
        path (str): The path that was requested as the root.

    Example:
        >>> error = RootNotADirectoryError("setup.cfg")
        >>> str(error)
        'Path is not a directory: setup.cfg'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the offending root path.

        Args:
            path (str): The path that was requested as the root.
        """
        self.path = path
        super().__init__(f"Path is not a directory: {path}")

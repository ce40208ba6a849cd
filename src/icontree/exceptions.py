class PathInvalidError(ValueError):
    """
    Exception raised when the root of a render is missing or is not a directory.

    This is raised before any output is produced, so callers never see a partial
    tree for an invalid root.

    Attributes:
        path (str): The offending path as given by the caller.

    Example:
        >>> error = PathInvalidError("/no/such/dir")
        >>> str(error)
        "'/no/such/dir' is not a valid directory"
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the invalid path.

        Args:
            path (str): The path that failed validation.
        """
        self.path = path
        super().__init__(f"'{path}' is not a valid directory")


class EncodingFailureError(Exception):
    """
    Exception raised when an entry name or symlink target is not valid text.

    Display requires UTF-8 text, so such an entry cannot be rendered without
    corrupting the output. The tree renderer treats this like an I/O failure of
    the single entry and applies the configured error policy.

    Attributes:
        path (str): Printable (escaped) form of the offending path.

    Example:
        >>> error = EncodingFailureError("bad\\udcffname")
        >>> str(error)
        'Path is not valid UTF-8 text: bad\\\\udcffname'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path (str): The path as returned by the OS, possibly containing
                surrogate escapes. It is stored in an escaped, printable form.
        """
        self.path = path.encode("utf-8", "backslashreplace").decode("utf-8")
        super().__init__(f"Path is not valid UTF-8 text: {self.path}")

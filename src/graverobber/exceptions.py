class ContentDecodeError(Exception):
    """
    Exception raised when a file's content cannot be decoded as text.

    The content collector reads every included file as UTF-8 text. A file that is not
    valid UTF-8 aborts the whole scan; there is no fallback to binary-safe reading. The
    original ``UnicodeDecodeError`` is kept as ``__cause__`` when raised by the collector.

    Attributes:
        file_path (str): Path to the file that could not be decoded.
        encoding (str): The encoding that was attempted.

    Example:
        >>> error = ContentDecodeError("/path/to/image.dat")
        >>> str(error)
        'Cannot decode /path/to/image.dat as utf-8 text'
    """

    def __init__(self, file_path: str, encoding: str = "utf-8") -> None:
        """
        Initialize the exception with the path of the offending file.

        Args:
            file_path (str): Path to the file that could not be decoded.
            encoding (str, optional): Encoding used for the attempt. Defaults to "utf-8".
        """
        self.file_path = file_path
        self.encoding = encoding
        super().__init__(f"Cannot decode {file_path} as {encoding} text")


class ReportWriteError(Exception):
    """
    Exception raised when the report file cannot be written.

    Any previous report at the target path is left untouched. The underlying ``OSError``
    is kept as ``__cause__``.

    Attributes:
        report_path (str): Path the report was supposed to be written to.

    Example:
        >>> error = ReportWriteError("/project/report.txt", "Permission denied")
        >>> str(error)
        'Failed to write report /project/report.txt: Permission denied'
    """

    def __init__(self, report_path: str, reason: str) -> None:
        self.report_path = report_path
        super().__init__(f"Failed to write report {report_path}: {reason}")

"""Custom exception classes for the split/restore engine."""


class SplitterError(Exception):
    """
    Base exception class for all split/restore errors.
    """
    pass


class InvalidChunkLimitError(SplitterError):
    """
    Raised when a split is requested with a chunk limit that is not positive.
    """
    pass


class ChunkDirectoryNotFoundError(SplitterError):
    """
    Raised when the chunk subdirectory named by a manifest does not exist.
    """
    pass


class SizeMismatchError(SplitterError):
    """
    Raised when processed or restored byte counts disagree with the original size.
    """

    def __init__(self, message: str, expected: int, actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ChecksumMismatchError(SplitterError):
    """
    Raised when checksum verification fails during a strict restore.
    """

    def __init__(self, message: str, expected: str, actual: str):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ManifestError(SplitterError):
    """
    Raised when a manifest file cannot be parsed into a valid manifest.
    """
    pass

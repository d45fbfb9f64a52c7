# readset_pipeline/errors.py


class ReadsetError(Exception):
    """Base class for errors raised while building a readset."""
    pass


class UnreadableFileError(ReadsetError):
    """Raised when a chromatogram file is missing or cannot be parsed."""

    def __init__(self, path: str, reason: str):
        # args must mirror the signature so the error survives pickling across the pool
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"Cannot read chromatogram '{self.path}': {self.reason}"


class ConfigurationError(ReadsetError, ValueError):
    """Raised for invalid configuration values or inconsistent input paths."""
    pass

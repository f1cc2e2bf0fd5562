"""
Custom exception hierarchy for the propeller catalog.

Per-file problems are raised as FilenameParseError and collected by the
pipeline; only CatalogScanError aborts a whole run.
"""


class PropCatalogError(Exception):
    """Base exception for all propeller catalog errors."""
    pass


class CatalogScanError(PropCatalogError):
    """Raised when the dataset root is missing or holds no volumes."""
    pass


class FilenameParseError(PropCatalogError):
    """Raised when a single file name cannot be decoded."""

    def __init__(self, filename: str, reason: str):
        super().__init__(f"{filename}: {reason}")
        self.filename = filename
        self.reason = reason


class TableLoadError(PropCatalogError):
    """Raised when a data table exists but cannot be parsed."""
    pass

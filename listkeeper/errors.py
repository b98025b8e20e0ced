"""Errors raised while reading or writing list files."""


class FileLoadError(Exception):
    """A list file could not be used. The message is meant for the user."""


class FileFormatError(FileLoadError):
    """Missing marker line or a record with the wrong shape."""


class FileParseError(FileLoadError):
    """A field (date, priority, JSON body) could not be parsed."""

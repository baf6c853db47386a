"""Exceptions raised while converting an .xmind archive to markdown."""


class ConversionError(Exception):
    """Base class for every failure that ends a conversion run."""


class ArchiveOpenError(ConversionError):
    """The input path is missing, unreadable, or not a zip container."""


class EntryNotFoundError(ConversionError):
    """The archive holds no entry whose name ends with content.json."""


class EntryReadError(ConversionError):
    """The content.json entry could not be decompressed or read."""


class DecodeError(ConversionError):
    """content.json is not valid JSON or does not have the sheet/topic shape."""


class OutputCreateError(ConversionError):
    """The markdown output file could not be created or written."""


class MissingPathError(ConversionError):
    """No input path was given on the command line or at the prompt."""

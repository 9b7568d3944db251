# src/sic2lp/common/errors.py


class Sic2LpError(Exception):
    """Base class for every fatal conversion error."""

    exit_code = 1


class SourceReadError(Sic2LpError):
    """Raised when the SafeInCloud export cannot be read, decrypted or parsed."""

    exit_code = 10


class CardProcessingError(Sic2LpError):
    """Raised when a single card cannot be converted. Aborts the whole run."""

    exit_code = 11


class AttachmentError(CardProcessingError):
    """Raised when an attachment cannot be written to disk."""


class SitesWriteError(Sic2LpError):
    """Raised when the LastPass sites CSV cannot be written."""

    exit_code = 12


class NotesWriteError(Sic2LpError):
    """Raised when the LastPass secure notes CSV cannot be written."""

    exit_code = 13

"""Errors surfaced to callers.

Only bad input reaches the caller. Provider and cache failures are absorbed
by the orchestrator and never raised.
"""


class InputError(ValueError):
    """Required input is missing or unusable."""


class UnsupportedFormatError(InputError):
    """The document type cannot be read."""


class DocumentParseError(InputError):
    """A document of a supported type could not be parsed."""


class FetchError(InputError):
    """A job description URL could not be fetched."""


def require_text(value: str | None, what: str) -> str:
    """Return value if it holds non-whitespace text, else raise InputError."""
    if value is None or not value.strip():
        msg = f"{what} text is required"
        raise InputError(msg)
    return value

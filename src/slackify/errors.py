"""Error hierarchy for slackify.

Every public error class inherits from :class:`SlackifyError`. Each carries
a machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Conversion itself is total: malformed input degrades to an empty
contribution plus a :class:`~slackify.models.ConversionWarning`.  The
errors below are raised at internal seams and caught by the converter
that owns them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error slackify can raise."""

    CONVERSION_ERROR = "CONVERSION_ERROR"
    HTML_PARSE_ERROR = "HTML_PARSE_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class SlackifyError(Exception):
    """Base exception for all slackify errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Conversion errors
# ---------------------------------------------------------------------------

class SlackifyConversionError(SlackifyError):
    """Base class for errors during Markdown to Block Kit conversion."""

    def __init__(
        self,
        code: str = ErrorCode.CONVERSION_ERROR,
        message: str = "Conversion error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class SlackifyHTMLParseError(SlackifyConversionError):
    """An embedded HTML fragment could not be parsed for ``<img>`` tags.

    Raised by :func:`slackify.converter.html.extract_images` and handled by
    the HTML block converter, which treats it as "no image found".

    Context keys: ``raw`` (first 200 characters of the fragment).
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.HTML_PARSE_ERROR,
            message=message,
            context=context,
            cause=cause,
        )

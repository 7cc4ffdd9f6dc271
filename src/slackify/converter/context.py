"""Per-conversion state shared by the block converters."""

from __future__ import annotations

from slackify.config import SlackifyConfig
from slackify.models import ConversionWarning


class BuildContext:
    """Configuration plus the warnings collected during one conversion.

    Converters never store blocks here; they return them to the caller.
    """

    __slots__ = ("config", "warnings")

    def __init__(self, config: SlackifyConfig) -> None:
        self.config = config
        self.warnings: list[ConversionWarning] = []

    def add_warning(self, code: str, message: str, **context: object) -> None:
        self.warnings.append(ConversionWarning(
            code=code, message=message, context=dict(context),
        ))

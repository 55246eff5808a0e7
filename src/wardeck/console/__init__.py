"""Text output for War games."""

from wardeck.console.display import (
    TextListener,
    SummaryRenderer,
    format_card,
    describe_card,
)

__all__ = [
    "TextListener",
    "SummaryRenderer",
    "format_card",
    "describe_card",
]

"""Sigevents exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class SigEventsError(Exception):
    """Base exception for all sigevents failures."""


class SigEventsConfigError(SigEventsError):
    """Raised for invalid runtime configuration."""


class SigEventsDependencyError(SigEventsError):
    """Raised when an optional runtime dependency is missing."""


class SigEventsFeedError(SigEventsError):
    """Raised when a feed document cannot be read or parsed."""


class TimelineDecodeError(SigEventsError):
    """Raised when a feed cannot be decoded into a complete timeline."""


class TimelineEnvelopeError(TimelineDecodeError):
    """Raised when the outer feed envelope is structurally malformed."""


class TimelineClassificationError(TimelineDecodeError):
    """Raised when any timeline event fails classification.

    Attributes:
        event_index: Zero-based index of the first failing event.
        output_type: Discriminator of the failing event, if present.
    """

    def __init__(self, event_index: int, output_type: str | None) -> None:
        self.event_index = event_index
        self.output_type = output_type
        super().__init__(
            "Unable to classify timeline: event "
            f"#{event_index} ({output_type or 'missing outputType'}) "
            "is missing required fields or has an unsupported type."
        )

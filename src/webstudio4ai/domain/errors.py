from __future__ import annotations

"""
Studio Error Hierarchy.

User-facing failures raised at the session boundary. Tree-level conflicts are
never raised; they are logged and the offending operation is skipped.
"""


class StudioError(Exception):
    """Base class for errors surfaced to the user."""


class PromptValidationError(StudioError):
    """The submitted prompt was rejected before any service call."""


class SubmissionInProgressError(StudioError):
    """A generation request is already pending."""


class GenerationError(StudioError):
    """The generation service failed or returned an unusable response."""


class ExportError(StudioError):
    """The selected entry cannot be exported to a local file."""

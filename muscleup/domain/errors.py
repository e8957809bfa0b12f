"""Error taxonomy for the plan report flow.

Every action boundary (pick / extract / compose) catches PlanReportError and
turns its message into something the user sees.
"""


class PlanReportError(Exception):
    """Base class; str(exc) is the user-facing message."""


class InputError(PlanReportError):
    """No document, or the payload is not a PDF."""


class ExtractionError(PlanReportError):
    """Text of the source document is unavailable or empty."""


class ExtractionServiceError(ExtractionError):
    """The text extraction service failed or returned nothing."""


class NoExtractedDataError(ExtractionError):
    """The text was read but no food entry could be parsed from it."""


class CompositionError(PlanReportError):
    """Missing client fields, or the report could not be written."""


class SessionBusyError(PlanReportError):
    """Another action is already running on the same session."""


__all__ = [
    'PlanReportError', 'InputError', 'ExtractionError', 'ExtractionServiceError',
    'NoExtractedDataError', 'CompositionError', 'SessionBusyError',
]

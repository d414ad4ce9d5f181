"""Error taxonomy for the problem/hint/submission workflow.

Services raise these; routers turn them into HTTP responses.
"""

from __future__ import annotations


class WorkflowError(Exception):
    """Base class for every failure a workflow operation reports."""


class ValidationError(WorkflowError):
    """Missing or malformed required input."""


class NotFoundError(WorkflowError):
    """The referenced problem session does not exist."""


class GenerationFormatError(WorkflowError):
    """The model's reply could not be parsed into the expected shape."""


class PersistenceError(WorkflowError):
    """A store read or write failed."""


class UpstreamError(WorkflowError):
    """The text-generation call itself failed."""

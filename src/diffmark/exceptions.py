#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the diffmark library.

Exception Hierarchy
-------------------
- DiffmarkError (base exception)

  - ValidationError (parameter/option validation)

  - EditError (malformed edit sets reaching the apply step)

  - ApplyError (kept edits could not be applied to the source)

Out-of-range edit or group indices are not errors: the Diff operations
addressed by index report them through their return values instead.

"""

from typing import Any


class DiffmarkError(Exception):
    """Base exception class for all diffmark-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(DiffmarkError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class EditError(DiffmarkError):
    """Exception raised when a set of edits cannot be applied to a text.

    Raised by :func:`diffmark.diff.edits.apply_edits` for edits that are out
    of order, overlap one another, or point outside the source text.

    Parameters
    ----------
    message : str
        Description of the problem
    edit_index : int, optional
        Position of the offending edit within the supplied sequence

    """

    def __init__(self, message: str, edit_index: int | None = None, original_error: Exception | None = None):
        """Initialize the edit error with the offending edit position."""
        super().__init__(message, original_error=original_error)
        self.edit_index = edit_index


class ApplyError(DiffmarkError):
    """Exception raised when the kept edits of a Diff cannot be applied.

    This is the only failure :meth:`diffmark.diff.text_diff.Diff.modified_edits`
    can report. The underlying fault is available as ``original_error``.

    """

    pass

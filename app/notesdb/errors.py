# app/notesdb/errors.py
"""Exceptions raised by the notes data-access layer."""


class NotesError(Exception):
    """Base class for notes errors."""


class ValidationError(NotesError, ValueError):
    """A required input was missing or malformed. Raised before any store call."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


class MissingTableNameError(ValidationError):
    """The table name was not configured."""

    def __init__(self):
        super().__init__("table_name must be provided", field="table_name")


class RepositoryError(NotesError):
    """
    The backing store call failed, or its response could not be decoded.

    str() is always the generic message. The store's own message is
    kept in client_message and must not reach end users.
    """

    GENERIC_MESSAGE = "a DynamoDB error occurred"

    def __init__(self, client_message):
        super().__init__(self.GENERIC_MESSAGE)
        self.client_message = client_message

    def __str__(self):
        return self.GENERIC_MESSAGE

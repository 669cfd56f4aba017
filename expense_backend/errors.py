# expense_backend/errors.py


class ExpenseTrackerError(Exception):
    """Base class for errors the API turns into a client response."""

    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ExpenseTrackerError):
    """Bad input: malformed date, bad amount, unknown category, half a range."""

    status_code = 400


class RecordNotFound(ExpenseTrackerError):
    """The record does not exist or belongs to another owner."""

    status_code = 404

from typing import List, Optional


class OrderError(Exception):
    """Base error for coffee orders."""


class MissingFieldError(OrderError):
    """
    Raised when an order is built without one or more of its fields.

    `fields` lists the missing input keys in declaration order; `invalid`
    lists keys that were present but failed validation in the same attempt.
    """

    def __init__(self, fields: List[str], invalid: Optional[List[str]] = None):
        self.fields = list(fields)
        self.invalid = list(invalid or [])
        message = f"Order is missing required fields: {', '.join(self.fields)}"
        if self.invalid:
            message += f" (also invalid: {', '.join(self.invalid)})"
        super().__init__(message)

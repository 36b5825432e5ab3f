from typing import Optional


class ValidationError(Exception):
    """Raised by entities when an invariant or lifecycle rule is violated."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)

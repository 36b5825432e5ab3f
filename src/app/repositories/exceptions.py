class ConflictError(Exception):
    """Raised by repository adapters when a uniqueness constraint is violated."""

    def __init__(self, message: str = "Resource already exists"):
        self.message = message
        super().__init__(message)

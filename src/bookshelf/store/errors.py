class StoreError(RuntimeError):
    """Raised when a document store operation fails."""

    def __init__(self, message: str, *, collection: str | None = None, operation: str | None = None):
        super().__init__(message)
        self.collection = collection
        self.operation = operation


class StoreNotInitializedError(StoreError):
    """Raised when the store is used before it has been opened."""

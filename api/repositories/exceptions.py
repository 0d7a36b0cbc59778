"""Storage faults raised by the repository layer."""


class RepositoryError(Exception):
    """Base exception for repository errors."""


class ConstraintViolationError(RepositoryError):
    """Raised when a uniqueness or foreign-key constraint is violated.

    The original driver error is kept as ``__cause__``.
    """

    def __init__(self, entity: str, operation: str, detail: str):
        self.entity = entity
        self.operation = operation
        self.detail = detail
        super().__init__(f"{entity} {operation} violated a constraint: {detail}")

class MissingDBNameError(Exception):
    """Raised when a database name is required but not configured."""

    def __init__(self):
        super().__init__("Database name is not set in the connection configuration.")


class NoSessionError(Exception):
    """Raised when there is no active database session."""

    def __init__(self):
        super().__init__("No active database session found.")


class SessionNotSetError(Exception):
    """Raised when the database session is not set."""

    def __init__(self):
        super().__init__("Database session is not set.")


class NotFoundError(LookupError):
    """Raised when a lookup that requires exactly one entity finds none."""

    def __init__(self, model_name: str, criteria: str):
        self.model_name = model_name
        self.criteria = criteria
        super().__init__(f"No {model_name} found for {criteria}.")


class AmbiguousResultError(LookupError):
    """Raised when a single-result query matches more than one entity."""

    def __init__(self, model_name: str, criteria: str):
        self.model_name = model_name
        self.criteria = criteria
        super().__init__(f"More than one {model_name} found for {criteria}.")


class ValidationFailureError(ValueError):
    """Raised when an entity violates a required invariant at persist time."""

    def __init__(self, model_name: str, field: str, reason: str):
        self.model_name = model_name
        self.field = field
        super().__init__(f"Invalid {model_name}.{field}: {reason}.")


class DependentRecordsError(ValidationFailureError):
    """Raised when deleting an entity that still owns dependent records."""

    def __init__(self, model_name: str, field: str, count: int):
        super().__init__(model_name, field, f"{count} dependent record(s) still attached")


class TransactionFailureError(Exception):
    """Raised when the store rejects a commit. The transaction has been rolled back."""

    def __init__(self, reason: str):
        super().__init__(f"Transaction rolled back: {reason}")


class UnknownModelError(NameError):
    """Raised when a model name does not match any mapped entity."""

    def __init__(self, model_name: str):
        super().__init__(f"Unknown model '{model_name}'.")

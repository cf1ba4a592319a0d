"""Domain-specific exceptions — framework-independent."""

from uuid import UUID


class DomainError(Exception):
    """Base class for every error raised by the domain and application layers."""


class DomainValidationError(DomainError):
    """Raised when caller-supplied input violates a domain constraint."""


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: UUID | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ConflictError(DomainError):
    """Raised when a write clashes with the current state of the store."""


class DuplicateEntityError(ConflictError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class EntityInUseError(ConflictError):
    """Raised when deleting an entity that other live entities still reference."""

    def __init__(self, entity_type: str, entity_id: UUID | str, dependent_type: str, count: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.dependent_type = dependent_type
        self.count = count
        super().__init__(
            f"cannot delete {entity_type} '{entity_id}': "
            f"still referenced by {count} {dependent_type}(s)"
        )


class StorageError(DomainError):
    """Raised when the underlying store fails an operation."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"failed to {operation}: {detail}")


class StorageConflictError(StorageError, ConflictError):
    """Raised when the store itself rejects a write as conflicting (unique index)."""

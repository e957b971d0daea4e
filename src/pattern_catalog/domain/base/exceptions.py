# src/pattern_catalog/domain/base/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class MalformedInputError(ValidationError):
    """Raised when a persistence record cannot be converted to a domain value."""
    pass


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""
    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(f"{entity_type} with id {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateEntityError(DomainException):
    """Raised when a uniqueness rule would be violated."""
    def __init__(self, entity_type: str, field: str, value: Any):
        super().__init__(f"{entity_type} with {field} {value} already exists")
        self.entity_type = entity_type
        self.field = field
        self.value = value


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []

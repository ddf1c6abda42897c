# Shared domain module
from .exceptions import (
    BusinessRuleViolationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'ConflictError',
    'BusinessRuleViolationError',
]

"""
Shared service-layer infrastructure.

- **UnitOfWork**: transaction boundary and repository factory
- **permissions**: role-based access checks on a ``Principal``
"""
from __future__ import annotations

from . import permissions
from .permissions import Principal
from .unit_of_work import TransactionError, UnitOfWork

__all__ = [
    "permissions",
    "Principal",
    "TransactionError",
    "UnitOfWork",
]

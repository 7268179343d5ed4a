"""Boundary Protocols — contracts between services.

Invariants:
    - ExerciseService depends on UserLookup, not on UserService directly
    - Implementations provided by the shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO
"""

from typing import Protocol
from uuid import UUID


class UserLike(Protocol):
    """Structural contract for User objects returned by lookups."""
    user_id: UUID
    username: str


class UserLookup(Protocol):
    """Contract for resolving a user id — implemented by UserService."""
    async def find_by_user_id(self, user_id: str) -> list[UserLike]: ...

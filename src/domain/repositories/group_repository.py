"""Group repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.group import Group


class IGroupRepository(Protocol):
    """Repository interface for Group entities.

    Every group returned carries its full membership.
    """

    async def get(self, id: UUID) -> Group | None:
        """Get a group by ID."""
        ...

    async def list_all(self) -> list[Group]:
        """Get all groups."""
        ...

    async def exists_by_name(self, name: str) -> bool:
        """Check for a group name, ignoring case and surrounding whitespace."""
        ...

    async def create(self, group: Group) -> Group:
        """Create a new group."""
        ...

    async def save(self, group: Group) -> Group:
        """Persist group attributes and synchronize its membership."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a group."""
        ...

"""User as seen by the permission engine."""

from dataclasses import dataclass

from buildguard.domain.value_objects import Role


@dataclass(frozen=True)
class User:
    """Authenticated user. Only id and role matter for authorization."""

    id: str
    role: Role

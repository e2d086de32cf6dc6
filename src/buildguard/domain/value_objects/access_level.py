"""Per-tool access levels for permission templates."""

from enum import StrEnum


class AccessLevel(StrEnum):
    """Ordered access level: none < read_only < standard < admin."""

    NONE = "none"
    READ_ONLY = "read_only"
    STANDARD = "standard"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def at_least(self, required: "AccessLevel") -> bool:
        """True if this level grants at least `required`."""
        return self.rank >= required.rank

    @classmethod
    def parse(cls, value: str | None) -> "AccessLevel":
        """Lenient lookup for stored template values. Unknown or missing -> NONE."""
        if value is None:
            return cls.NONE
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


_RANKS = {
    AccessLevel.NONE: 0,
    AccessLevel.READ_ONLY: 1,
    AccessLevel.STANDARD: 2,
    AccessLevel.ADMIN: 3,
}

"""Error taxonomy for the box office core.

Messages follow Protean's ``{field: [message, ...]}`` convention so they can be
surfaced as form errors without translation.
"""

from protean.exceptions import (
    ConfigurationError,
    InvalidOperationError,
    ObjectNotFoundError,
    ValidationError,
)

__all__ = ["ConfigError", "InventoryExceeded", "NotFound", "ValidationError"]


class ConfigError(ConfigurationError):
    """Catalogue data failed its referential-integrity checks. Fatal at startup."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__({"catalog": self.problems})

    def __str__(self) -> str:
        return "Invalid catalog: " + "; ".join(self.problems)


class NotFound(ObjectNotFoundError):
    """An unknown id was passed to a lookup or cart operation."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__({kind: [f"No {kind} with id {identifier!r}"]})

    def __str__(self) -> str:
        return f"No {self.kind} with id {self.identifier!r}"


class InventoryExceeded(InvalidOperationError):
    """A cart line asks for more tickets than the category has left."""

    def __init__(self, category_id: str, requested: int, available: int) -> None:
        self.category_id = category_id
        self.requested = requested
        self.available = available
        super().__init__({category_id: [f"No longer available: {requested} requested, {available} left"]})

    def __str__(self) -> str:
        return f"{self.category_id}: {self.requested} requested, {self.available} left"

"""Whisky domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WhiskyEntity:
    """Domain entity for a single whisky.

    Attributes:
        id: Identifier assigned by the store, None until the whisky is persisted
        name: Whisky name, e.g. "Talisker 57° North"
        origin: Where the whisky comes from, e.g. "Scotland, Island"
    """

    id: int | None
    name: str | None
    origin: str | None

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned an identifier."""
        return self.id is not None

"""Named card properties and uniform lookup over cards and card identities."""

from __future__ import annotations

import enum
from typing import Any


class NumberProperty(enum.Enum):
    """A card's numeric properties."""

    COST = "Cost"
    FLIP_COST = "Flip Cost"
    HEALTH = "Health"
    POWER = "Power"
    DEFENSE = "Defense"

    def __str__(self) -> str:
        return self.value

    @property
    def attribute(self) -> str:
        return self.name.lower()


class ArrayProperty(enum.Enum):
    """A card's list properties."""

    FUNCTIONS = "Functions"

    def __str__(self) -> str:
        return self.value

    @property
    def attribute(self) -> str:
        return self.name.lower()


class TextProperty(enum.Enum):
    """A card's text properties."""

    ID = "ID"
    NAME = "Name"
    TYPE = "Type"
    DESCRIPTION = "Description"
    FLAVOR_TEXT = "FlavorText"

    def __str__(self) -> str:
        return self.value

    @property
    def attribute(self) -> str:
        return _TEXT_ATTRIBUTES[self]


_TEXT_ATTRIBUTES = {
    TextProperty.ID: "id",
    TextProperty.NAME: "name",
    TextProperty.TYPE: "card_type",
    TextProperty.DESCRIPTION: "description",
    TextProperty.FLAVOR_TEXT: "flavor_text",
}

_STATS = frozenset({NumberProperty.HEALTH, NumberProperty.DEFENSE, NumberProperty.POWER})


class Readable:
    """Property lookup shared by cards and card identities.

    Classes using it provide some of the attributes ``id``, ``name``,
    ``card_type``, ``description``, ``flavor_text``, ``cost``, ``flip_cost``,
    ``health``, ``defense``, ``power`` and ``functions``. A missing attribute,
    or one set to ``None``, reads as absent.
    """

    def _lookup(self, attribute: str) -> Any:
        return getattr(self, attribute, None)

    def _is_command(self) -> bool:
        card_type = self._lookup("card_type")
        return card_type is not None and "command" in card_type

    def num_property(self, prop: NumberProperty) -> Any:
        """The numeric property, or ``None``.

        Commands have no health, defense or power.
        """
        if prop in _STATS and self._is_command():
            return None
        return self._lookup(prop.attribute)

    def text_property(self, prop: TextProperty) -> str | None:
        value = self._lookup(prop.attribute)
        return None if value is None else str(value)

    def vec_property(self, prop: ArrayProperty) -> list[str] | None:
        value = self._lookup(prop.attribute)
        return None if value is None else list(value)
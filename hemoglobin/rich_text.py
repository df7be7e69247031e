"""Rich card text, card identities and keywords.

Card descriptions may mix plain text with links to other cards, searches,
line breaks and sagas. Card identities describe cards loosely, for matching.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, TypeVar, Union

from hemoglobin.kins import Kin
from hemoglobin.numbers import MaybeImprecise
from hemoglobin.properties import ArrayProperty, NumberProperty, Readable, TextProperty

_T = TypeVar("_T")

_ELEMENT_KEYS = ("display", "identity", "search", "id")


def _as_str(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValueError(f"expected a string, got {raw!r}")
    return raw


def _as_str_list(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        raise ValueError(f"expected a list of strings, got {raw!r}")
    return [_as_str(item) for item in raw]


def _optional(mapping: dict[str, Any], key: str, parse: Callable[[Any], _T]) -> _T | None:
    raw = mapping.get(key)
    return None if raw is None else parse(raw)


@dataclass
class CardId(Readable):
    """A loose description of a card; every field may be left unset."""

    name: str | None = None
    cost: MaybeImprecise | None = None
    flip_cost: MaybeImprecise | None = None
    description: RichString | None = None
    keywords: list[Keyword] | None = None
    card_type: str | None = None
    kin: Kin | None = None
    health: MaybeImprecise | None = None
    defense: MaybeImprecise | None = None
    power: MaybeImprecise | None = None
    abilities: list[str] | None = None
    functions: list[str] | None = None

    def num_property(self, prop: NumberProperty) -> MaybeImprecise | None:
        """A numeric property; stats are absent when the type names a command."""
        if prop is NumberProperty.COST:
            return self.cost
        if prop is NumberProperty.FLIP_COST:
            return self.flip_cost
        if self.card_type is not None and "command" in self.card_type:
            return None
        if prop is NumberProperty.HEALTH:
            return self.health
        if prop is NumberProperty.DEFENSE:
            return self.defense
        if prop is NumberProperty.POWER:
            return self.power
        raise ValueError(f"unknown number property {prop!r}")

    def text_property(self, prop: TextProperty) -> str | None:
        """A text property; identities never carry an id or flavor text."""
        if prop is TextProperty.NAME:
            return self.name
        if prop is TextProperty.TYPE:
            return self.card_type
        if prop is TextProperty.DESCRIPTION:
            return None if self.description is None else str(self.description)
        if prop in (TextProperty.ID, TextProperty.FLAVOR_TEXT):
            return None
        raise ValueError(f"unknown text property {prop!r}")

    def vec_property(self, prop: ArrayProperty) -> list[str] | None:
        """A copy of a list property, or ``None`` when unset."""
        if prop is ArrayProperty.FUNCTIONS:
            return None if self.functions is None else list(self.functions)
        raise ValueError(f"unknown array property {prop!r}")

    def to_json(self) -> dict[str, Any]:
        """Serialise, leaving out every unset field."""
        pairs: list[tuple[str, Any]] = [
            ("name", self.name),
            ("cost", self.cost.to_json() if self.cost is not None else None),
            ("flip_cost", self.flip_cost.to_json() if self.flip_cost is not None else None),
            (
                "description",
                self.description.to_json() if self.description is not None else None,
            ),
            (
                "keywords",
                [kw.to_json() for kw in self.keywords] if self.keywords is not None else None,
            ),
            ("type", self.card_type),
            ("kin", self.kin.to_json() if self.kin is not None else None),
            ("health", self.health.to_json() if self.health is not None else None),
            ("defense", self.defense.to_json() if self.defense is not None else None),
            ("power", self.power.to_json() if self.power is not None else None),
            ("abilities", list(self.abilities) if self.abilities is not None else None),
            ("functions", list(self.functions) if self.functions is not None else None),
        ]
        return {key: value for key, value in pairs if value is not None}

    @classmethod
    def from_json(cls, value: Any) -> CardId:
        if not isinstance(value, dict):
            raise ValueError(f"expected an object for a card identity, got {value!r}")

        def keywords(raw: Any) -> list[Keyword]:
            if not isinstance(raw, list):
                raise ValueError(f"expected a list of keywords, got {raw!r}")
            return [Keyword.from_json(item) for item in raw]

        return cls(
            name=_optional(value, "name", _as_str),
            cost=_optional(value, "cost", MaybeImprecise.from_json),
            flip_cost=_optional(value, "flip_cost", MaybeImprecise.from_json),
            description=_optional(value, "description", RichString.from_json),
            keywords=_optional(value, "keywords", keywords),
            card_type=_optional(value, "type", _as_str),
            kin=_optional(value, "kin", Kin.from_json),
            health=_optional(value, "health", MaybeImprecise.from_json),
            defense=_optional(value, "defense", MaybeImprecise.from_json),
            power=_optional(value, "power", MaybeImprecise.from_json),
            abilities=_optional(value, "abilities", _as_str_list),
            functions=_optional(value, "functions", _as_str_list),
        )


KeywordData = Union[CardId, str]


@dataclass
class Keyword:
    """A keyword on a card, optionally carrying a card identity or a string."""

    name: str
    data: KeywordData | None = None

    def to_json(self) -> dict[str, Any]:
        """Serialise; data is written as an object tagged ``"type": "CardId"``.

        String data and identities with a type of their own cannot be written
        in the tagged form and raise :class:`ValueError`.
        """
        result: dict[str, Any] = {"name": self.name}
        if self.data is None:
            return result
        if isinstance(self.data, str):
            raise ValueError("string keyword data cannot be serialised in tagged form")
        if self.data.card_type is not None:
            raise ValueError("keyword data cannot carry a type field alongside its tag")
        result["data"] = {"type": "CardId", **self.data.to_json()}
        return result

    @classmethod
    def from_json(cls, value: Any) -> Keyword:
        if not isinstance(value, dict):
            raise ValueError(f"expected an object for a keyword, got {value!r}")
        if "name" not in value:
            raise ValueError("missing field name")
        name = _as_str(value["name"])
        raw = value.get("data")
        if raw is None:
            return cls(name)
        if not isinstance(raw, dict):
            raise ValueError(f"expected tagged keyword data, got {raw!r}")
        tag = raw.get("type")
        if tag != "CardId":
            raise ValueError(f"unsupported keyword data {tag!r}")
        rest = {key: item for key, item in raw.items() if key != "type"}
        return cls(name, CardId.from_json(rest))


class RichElement:
    """One piece of rich text."""

    def to_json(self) -> Any:
        if isinstance(self, TextElement):
            return self.text
        if isinstance(self, CardIdElement):
            return {"display": self.display, "identity": self.identity.to_json()}
        if isinstance(self, SpecificCardElement):
            return {"display": self.display, "id": self.id}
        if isinstance(self, CardSearchElement):
            return {"display": self.display, "search": self.search}
        if isinstance(self, SagaElement):
            return [chapter.to_json() for chapter in self.chapters]
        if isinstance(self, LineBreakElement):
            return "\n"
        raise TypeError(f"unknown rich element {self!r}")

    @classmethod
    def from_json(cls, value: Any) -> RichElement:
        if isinstance(value, str):
            if value in ("\n", "\r\n"):
                return LineBreakElement()
            return TextElement(value)
        if isinstance(value, list):
            return SagaElement([RichString.from_json(item) for item in value])
        if isinstance(value, dict):
            return _element_from_mapping(value)
        raise ValueError(f"expected a string, a list or an object, got {value!r}")


def _element_from_mapping(value: dict[str, Any]) -> RichElement:
    for key in value:
        if key not in _ELEMENT_KEYS:
            raise ValueError(f"unknown field {key!r}, expected one of display, identity, id")
    display = _optional(value, "display", _as_str)
    identity = _optional(value, "identity", CardId.from_json)
    card = _optional(value, "id", _as_str)
    search = _optional(value, "search", _as_str)

    if display is None:
        raise ValueError("missing field display")
    present = (identity is not None, card is not None, search is not None)
    if present == (True, True, True):
        raise ValueError("expected something with either id or identity")
    if present == (False, False, True):
        return CardSearchElement(display, search)
    if present == (True, False, False):
        return CardIdElement(display, identity)
    if present == (False, True, False):
        return SpecificCardElement(display, card)
    if present == (False, False, False):
        raise ValueError("missing field either id or identity or search")
    raise ValueError("a rich element takes only one of identity, id or search")


@dataclass
class TextElement(RichElement):
    """Plain text."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass
class CardIdElement(RichElement):
    """Text linking to cards that match an identity."""

    display: str
    identity: CardId

    def __str__(self) -> str:
        return self.display


@dataclass
class SpecificCardElement(RichElement):
    """Text linking to one card by its id."""

    display: str
    id: str

    def __str__(self) -> str:
        return self.display


@dataclass
class CardSearchElement(RichElement):
    """Text linking to a card search."""

    display: str
    search: str

    def __str__(self) -> str:
        return self.display


@dataclass
class SagaElement(RichElement):
    """A saga: a sequence of chapters, each one rich text."""

    chapters: list[RichString] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(f"{chapter}\n" for chapter in self.chapters)


@dataclass
class LineBreakElement(RichElement):
    """A line break."""

    def __str__(self) -> str:
        return "\n"


@dataclass
class RichString:
    """Rich text: a sequence of :class:`RichElement`."""

    elements: list[RichElement] = field(default_factory=list)

    def __iter__(self) -> Iterator[RichElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __str__(self) -> str:
        return "".join(str(element) for element in self.elements)

    def push_string(self, string: str) -> None:
        self.elements.append(TextElement(string))

    def to_json(self) -> str | list[Any]:
        """A lone text element or empty text becomes a plain string; anything else a list."""
        if not self.elements:
            return ""
        if len(self.elements) == 1 and isinstance(self.elements[0], TextElement):
            return self.elements[0].text
        return [element.to_json() for element in self.elements]

    @classmethod
    def from_json(cls, value: Any) -> RichString:
        if isinstance(value, str):
            return cls([TextElement(value)])
        if isinstance(value, list):
            return cls([RichElement.from_json(item) for item in value])
        raise ValueError(f"expected a string or a list of rich elements, got {value!r}")
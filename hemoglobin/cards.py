"""Cards, their images, and their serialised form."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any

from hemoglobin.kins import Kin
from hemoglobin.numbers import MaybeImprecise
from hemoglobin.properties import ArrayProperty, NumberProperty, Readable, TextProperty
from hemoglobin.rich_text import Keyword, RichString
from hemoglobin.text import clean_ascii_keep_case

_REQUIRED_FIELDS = (
    "id",
    "name",
    "description",
    "cost",
    "health",
    "defense",
    "power",
    "type",
    "legality",
)


def _as_str(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValueError(f"expected a string, got {raw!r}")
    return raw


def _as_str_list(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        raise ValueError(f"expected a list of strings, got {raw!r}")
    return [_as_str(item) for item in raw]


@dataclass
class ImageSource:
    """Where a card's image comes from: a list of files, or the card's name."""

    files: list[str] | None = None

    @property
    def uses_card_name(self) -> bool:
        return self.files is None

    def to_json(self) -> Any:
        if self.files is None:
            return "CardName"
        return {"Files": list(self.files)}

    @classmethod
    def from_json(cls, value: Any) -> ImageSource:
        if value == "CardName":
            return cls()
        if isinstance(value, dict) and len(value) == 1:
            ((tag, payload),) = value.items()
            if tag == "Files":
                return cls(_as_str_list(payload))
            if tag == "CardName" and payload is None:
                return cls()
        raise ValueError(f"unknown image source {value!r}")


@dataclass
class Image:
    """An image for a card, with the people who made it."""

    sources: ImageSource = field(default_factory=ImageSource)
    authors: list[str] = field(default_factory=list)

    def to_json(self) -> dict[str, Any]:
        return {"sources": self.sources.to_json(), "authors": list(self.authors)}

    @classmethod
    def from_json(cls, value: Any) -> Image:
        if not isinstance(value, dict):
            raise ValueError(f"expected an object for an image, got {value!r}")
        for key in ("sources", "authors"):
            if key not in value:
                raise ValueError(f"missing field {key}")
        return cls(ImageSource.from_json(value["sources"]), _as_str_list(value["authors"]))


def _pick(image: Image | None) -> str | None:
    if image is None or image.sources.files is None:
        return None
    files = image.sources.files
    if not files:
        raise ValueError("image source has no files to choose from")
    return random.choice(files)


@dataclass
class Card(Readable):
    """A Bloodless card."""

    id: str = ""
    name: str = ""
    images: list[Image] = field(default_factory=list)
    description: RichString = field(default_factory=RichString)
    cost: MaybeImprecise = field(default_factory=MaybeImprecise)
    flip_cost: MaybeImprecise | None = None
    health: MaybeImprecise = field(default_factory=MaybeImprecise)
    defense: MaybeImprecise = field(default_factory=MaybeImprecise)
    power: MaybeImprecise = field(default_factory=MaybeImprecise)
    card_type: str = ""
    keywords: list[Keyword] = field(default_factory=list)
    kin: Kin | None = None
    abilities: list[str] = field(default_factory=list)
    card_set: str = ""
    legality: dict[str, str] = field(default_factory=dict)
    other: list[str] = field(default_factory=list)
    functions: list[str] = field(default_factory=list)
    flavor_text: str = ""

    def __str__(self) -> str:
        name = self.name
        if len(name) > 20:
            name = name[:18]
        nameline = name.ljust(24) + str(self.cost)
        return f"{nameline}\n\n{self.description}\n"

    def num_property(self, prop: NumberProperty) -> MaybeImprecise | None:
        """A numeric property; stats other than cost are absent on commands."""
        if prop is NumberProperty.COST:
            return self.cost
        if prop is NumberProperty.FLIP_COST:
            return self.flip_cost
        if "command" in self.card_type:
            return None
        if prop is NumberProperty.HEALTH:
            return self.health
        if prop is NumberProperty.DEFENSE:
            return self.defense
        if prop is NumberProperty.POWER:
            return self.power
        raise ValueError(f"unknown number property {prop!r}")

    def text_property(self, prop: TextProperty) -> str | None:
        """A text property; a card always has every one."""
        if prop is TextProperty.ID:
            return self.id
        if prop is TextProperty.NAME:
            return self.name
        if prop is TextProperty.TYPE:
            return self.card_type
        if prop is TextProperty.DESCRIPTION:
            return str(self.description)
        if prop is TextProperty.FLAVOR_TEXT:
            return self.flavor_text
        raise ValueError(f"unknown text property {prop!r}")

    def vec_property(self, prop: ArrayProperty) -> list[str] | None:
        """An array property; a card always has every one."""
        if prop is ArrayProperty.FUNCTIONS:
            return self.functions
        raise ValueError(f"unknown array property {prop!r}")

    def random_image_path(self) -> str:
        """A random file of the last image, or the name-based path."""
        chosen = _pick(self.images[-1] if self.images else None)
        return chosen if chosen is not None else self.name_image_path()

    def image_path(self, index: int) -> str:
        """A random file of the image at ``index``, or the name-based path."""
        image = self.images[index] if 0 <= index < len(self.images) else None
        chosen = _pick(image)
        return chosen if chosen is not None else self.name_image_path()

    def name_image_path(self) -> str:
        return clean_ascii_keep_case(self.name.replace(" ", ""))

    def artists(self) -> list[str]:
        return [author for image in self.images for author in image.authors]

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.images:
            result["images"] = [image.to_json() for image in self.images]
        result["description"] = self.description.to_json()
        result["cost"] = self.cost.to_json()
        result["flip_cost"] = None if self.flip_cost is None else self.flip_cost.to_json()
        result["health"] = self.health.to_json()
        result["defense"] = self.defense.to_json()
        result["power"] = self.power.to_json()
        result["type"] = self.card_type
        if self.keywords:
            result["keywords"] = [keyword.to_json() for keyword in self.keywords]
        if self.kin is not None:
            result["kin"] = self.kin.to_json()
        if self.abilities:
            result["abilities"] = list(self.abilities)
        if self.card_set:
            result["set"] = self.card_set
        result["legality"] = dict(self.legality)
        if self.other:
            result["other"] = list(self.other)
        if self.functions:
            result["functions"] = list(self.functions)
        if self.flavor_text:
            result["flavor_text"] = self.flavor_text
        return result

    @classmethod
    def from_json(cls, value: Any) -> Card:
        if not isinstance(value, dict):
            raise ValueError(f"expected an object for a card, got {value!r}")
        for key in _REQUIRED_FIELDS:
            if key not in value:
                raise ValueError(f"missing field {key}")

        legality = value["legality"]
        if not isinstance(legality, dict):
            raise ValueError(f"expected an object for legality, got {legality!r}")

        images = value.get("images", [])
        if not isinstance(images, list):
            raise ValueError(f"expected a list of images, got {images!r}")
        keywords = value.get("keywords", [])
        if not isinstance(keywords, list):
            raise ValueError(f"expected a list of keywords, got {keywords!r}")

        flip_cost = value.get("flip_cost")
        kin = value.get("kin")
        return cls(
            id=_as_str(value["id"]),
            name=_as_str(value["name"]),
            images=[Image.from_json(item) for item in images],
            description=RichString.from_json(value["description"]),
            cost=MaybeImprecise.from_json(value["cost"]),
            flip_cost=None if flip_cost is None else MaybeImprecise.from_json(flip_cost),
            health=MaybeImprecise.from_json(value["health"]),
            defense=MaybeImprecise.from_json(value["defense"]),
            power=MaybeImprecise.from_json(value["power"]),
            card_type=_as_str(value["type"]),
            keywords=[Keyword.from_json(item) for item in keywords],
            kin=None if kin is None else Kin.from_json(kin),
            abilities=_as_str_list(value.get("abilities", [])),
            card_set=_as_str(value.get("set", "")),
            legality={_as_str(k): _as_str(v) for k, v in legality.items()},
            other=_as_str_list(value.get("other", [])),
            functions=_as_str_list(value.get("functions", [])),
            flavor_text=_as_str(value.get("flavor_text", "")),
        )
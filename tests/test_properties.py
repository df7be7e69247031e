from dataclasses import dataclass, field
from typing import Optional

from hemoglobin.numbers import MaybeImprecise, MaybeVar
from hemoglobin.properties import (
    ArrayProperty,
    NumberProperty,
    Readable,
    TextProperty,
)


@dataclass
class FullCard(Readable):
    id: str = "card-1"
    name: str = "Ant Queen"
    card_type: str = "creature"
    description: str = "Does things"
    flavor_text: str = ""
    cost: MaybeImprecise = field(default_factory=lambda: MaybeImprecise(MaybeVar(2)))
    flip_cost: Optional[MaybeImprecise] = None
    health: MaybeImprecise = field(default_factory=lambda: MaybeImprecise(MaybeVar(3)))
    defense: MaybeImprecise = field(default_factory=MaybeImprecise)
    power: MaybeImprecise = field(default_factory=lambda: MaybeImprecise(MaybeVar(1)))
    functions: list = field(default_factory=lambda: ["removal"])


@dataclass
class PartialCard(Readable):
    name: Optional[str] = None
    card_type: Optional[str] = None
    health: Optional[MaybeImprecise] = None
    functions: Optional[list] = None


def test_display_names():
    assert NumberProperty.__str__(NumberProperty.FLIP_COST) == "Flip Cost"
    assert TextProperty.__str__(TextProperty.FLAVOR_TEXT) == "FlavorText"
    assert TextProperty.__str__(TextProperty.ID) == "ID"
    assert ArrayProperty.__str__(ArrayProperty.FUNCTIONS) == "Functions"


def test_number_properties_of_creature():
    card = FullCard()
    for prop in NumberProperty:
        assert Readable.num_property(card, prop) == getattr(card, prop.attribute)


def test_command_has_no_stats_but_keeps_cost():
    card = FullCard(card_type="instant command")
    assert Readable.num_property(card, NumberProperty.HEALTH) is None
    assert Readable.num_property(card, NumberProperty.POWER) is None
    assert Readable.num_property(card, NumberProperty.DEFENSE) is None
    assert Readable.num_property(card, NumberProperty.COST) == MaybeImprecise(MaybeVar(2))


def test_text_properties():
    card = FullCard()
    assert Readable.text_property(card, TextProperty.NAME) == "Ant Queen"
    assert Readable.text_property(card, TextProperty.TYPE) == "creature"
    assert Readable.text_property(card, TextProperty.ID) == "card-1"
    assert Readable.text_property(card, TextProperty.FLAVOR_TEXT) == ""


def test_vec_property_is_a_copy():
    card = FullCard()
    functions = Readable.vec_property(card, ArrayProperty.FUNCTIONS)
    assert functions == ["removal"]
    functions.append("draw")
    assert card.functions == ["removal"]


def test_partial_identity_reads_absent():
    identity = PartialCard(name="Bee")
    assert Readable.text_property(identity, TextProperty.NAME) == "Bee"
    assert Readable.text_property(identity, TextProperty.ID) is None
    assert Readable.text_property(identity, TextProperty.FLAVOR_TEXT) is None
    assert Readable.num_property(identity, NumberProperty.COST) is None
    assert Readable.vec_property(identity, ArrayProperty.FUNCTIONS) is None


def test_partial_identity_without_type_keeps_health():
    health = MaybeImprecise(MaybeVar(4))
    assert PartialCard(health=health).num_property(NumberProperty.HEALTH) == health
    command = PartialCard(card_type="command", health=health)
    assert command.num_property(NumberProperty.HEALTH) is None
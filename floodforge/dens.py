"""Creature dens: what spawns in them, their tags and the tag's slider value."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

LIZARDS = frozenset(
    {
        "BlackLizard",
        "BlueLizard",
        "CyanLizard",
        "GreenLizard",
        "PinkLizard",
        "RedLizard",
        "WhiteLizard",
        "YellowLizard",
        "Salamander",
        "EelLizard",
        "SpitLizard",
        "TrainLizard",
        "ZoopLizard",
        "BasiliskLizard",
        "BlizzardLizard",
        "IndigoLizard",
    }
)

WINTER_CREATURES = frozenset({"BigSpider", "SpitterSpider", "Yeek"})

VOIDSEA_CREATURES = frozenset(
    {
        "RedLizard",
        "RedCentipede",
        "BigSpider",
        "DaddyLongLegs",
        "BrotherLongLegs",
        "TerrorLongLegs",
        "BigEel",
        "CyanLizard",
    }
)

LENGTH_CREATURES = frozenset({"PoleMimic", "Centipede"})

SLIDER_TAGS = frozenset({"MEAN", "SEED", "LENGTH", "RotType"})
"""Tags whose value is set with a slider."""

_DATA_TAGS = frozenset({"MEAN", "LENGTH", "SEED"})


@dataclass
class Den:
    """A creature den: the creature type, how many, an optional tag and its value."""

    type: str = ""
    count: int = 0
    tag: str = ""
    data: float = 0.0

    @property
    def has_slider(self) -> bool:
        return self.tag in SLIDER_TAGS


class SliderType(Enum):
    INT = "int"
    FLOAT = "float"


@dataclass(frozen=True)
class SliderRange:
    """The range and kind of values a den's tag slider can take."""

    minimum: float = 0.0
    maximum: float = 1.0
    kind: SliderType = SliderType.FLOAT


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def is_lizard(creature_type: str) -> bool:
    return creature_type in LIZARDS


def ensure_flag(den: Den) -> SliderRange:
    """Drop a tag the den's creature cannot carry and return the tag's slider range.

    The den's value is reset to 0 unless its tag is MEAN, LENGTH or SEED.
    """
    lizard = is_lizard(den.type)

    if den.tag == "MEAN" and not lizard:
        den.tag = ""

    if den.tag == "LENGTH" and den.type not in LENGTH_CREATURES:
        den.tag = ""

    if den.tag == "Winter" and den.type not in WINTER_CREATURES and not lizard:
        den.tag = ""

    if den.tag == "Voidsea" and den.type not in VOIDSEA_CREATURES:
        den.tag = ""

    if den.tag not in _DATA_TAGS:
        den.data = 0.0

    if den.tag == "MEAN":
        return SliderRange(-1.0, 1.0, SliderType.FLOAT)
    if den.tag == "LENGTH":
        if den.type == "Centipede":
            return SliderRange(0.1, 1.0, SliderType.FLOAT)
        return SliderRange(1.0, 32.0, SliderType.FLOAT)
    if den.tag == "SEED":
        return SliderRange(0.0, 65536.0, SliderType.INT)
    if den.tag == "RotType":
        if not lizard:
            den.tag = ""
            return SliderRange(kind=SliderType.INT)
        return SliderRange(0.0, 3.0, SliderType.INT)
    return SliderRange()


def choose_creature(den: Den, creature_type: str, shift: bool) -> SliderRange:
    """Apply a click on a creature button.

    CLEAR empties the den. Clicking the den's own type (or UNKNOWN) adds one,
    or with shift removes one, emptying the den at zero. Any other type
    replaces the den's creature with a single one.
    """
    if creature_type == "CLEAR":
        den.type = ""
        den.count = 0
    elif den.type == creature_type or creature_type == "UNKNOWN":
        if shift:
            den.count -= 1
            if den.count <= 0:
                den.type = ""
                den.count = 0
        else:
            den.count += 1
    else:
        den.type = creature_type
        den.count = 1
    return ensure_flag(den)


def toggle_tag(den: Den, tag: str) -> SliderRange:
    """Set ``tag`` on the den, or remove it if it is already set."""
    den.tag = "" if den.tag == tag else tag
    return ensure_flag(den)


def set_slider(den: Den, slider: SliderRange, progress: float) -> float:
    """Set the den's value from a slider position between 0 and 1; returns the value."""
    progress = min(max(progress, 0.0), 1.0)
    value = progress * (slider.maximum - slider.minimum) + slider.minimum
    if slider.kind is SliderType.INT:
        value = _round_half_away(value)
    den.data = value
    return value


def format_slider_value(den: Den) -> str:
    """The den's value as the slider label shows it; empty for tags without one."""
    if den.tag in ("MEAN", "LENGTH"):
        return f"{den.data:3.2f}"
    if den.tag in ("SEED", "RotType"):
        return f"{int(den.data):5d}"
    return ""
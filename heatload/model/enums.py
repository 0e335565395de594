"""
Closed enumerations used by the project state.

Every keyed collection in the project (seasons, envelope categories, load
kinds) is addressed through one of these enums. Input from the presentation
layer arrives as text; ``parse`` maps it to a member or returns None so the
caller can treat the command as addressing an invalid target.
"""

from enum import Enum
from typing import Any, Optional


def _normalize(text: str) -> str:
    return "".join(text.split()).lower()


class ParseableEnum(Enum):
    """Enum whose members can be looked up from loosely formatted text."""

    @classmethod
    def parse(cls, value: Any) -> Optional["ParseableEnum"]:
        """
        Look up a member by value or name, ignoring case and whitespace.

        Args:
            value: A member, its value or its name

        Returns:
            The matching member, or None if there is no match
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = _normalize(value)
        for member in cls:
            if key in (_normalize(member.value), _normalize(member.name)):
                return member
        return None


class Season(ParseableEnum):
    """Design seasons; all three are always present in the climate data."""

    SUMMER = "summer"
    MONSOON = "monsoon"
    WINTER = "winter"


class ElementCategory(ParseableEnum):
    """Envelope element categories."""

    GLASS = "glass"
    WALLS = "walls"
    ROOF = "roof"
    CEILING = "ceiling"
    FLOOR = "floor"
    PARTITIONS = "partitions"


class PressureRegime(ParseableEnum):
    """Room pressurization relative to its surroundings."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class OpeningType(ParseableEnum):
    """Leakage path through which infiltration enters the room."""

    DOOR = "Door"
    WINDOW = "Window"
    CRACK_GAP = "Crack/Gap"
    VENT = "Vent"


class LoadKind(ParseableEnum):
    """Internal load groups."""

    PEOPLE = "people"
    EQUIPMENT = "equipment"
    LIGHTS = "lights"


class ClimateTarget(ParseableEnum):
    """Which climate record a climate update addresses."""

    INSIDE = "inside"
    OUTSIDE = "outside"

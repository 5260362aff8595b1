"""Condition tiers derived from a Viking's statistics.

Each equipment slot is paired with a statistic; the statistic picks the
slot's condition. Wearables (boots, bottoms) and equipment (helmet, shield,
weapon) share the same breakpoints but use different labels:

  statistic  wearable   equipment
  0-9        Basic      None
  10-49      Ragged     Broken
  50-74      Worn       Damaged
  75-89      Used       Worn
  90-96      Good       Good
  97-99      Pristine   Perfect

Tables are (upper_bound, tier) pairs walked first-match-wins; the last
entry has no bound and catches everything above 96.
"""

from enum import Enum

from .errors import MalformedInputError

STAT_MIN = 0
STAT_MAX = 99


class WearableCondition(str, Enum):
    BASIC = "Basic"
    RAGGED = "Ragged"
    WORN = "Worn"
    USED = "Used"
    GOOD = "Good"
    PRISTINE = "Pristine"


class EquipmentCondition(str, Enum):
    NONE = "None"
    BROKEN = "Broken"
    DAMAGED = "Damaged"
    WORN = "Worn"
    GOOD = "Good"
    PERFECT = "Perfect"


WEARABLE_TIERS: list[tuple[int | None, WearableCondition]] = [
    (9, WearableCondition.BASIC),
    (49, WearableCondition.RAGGED),
    (74, WearableCondition.WORN),
    (89, WearableCondition.USED),
    (96, WearableCondition.GOOD),
    (None, WearableCondition.PRISTINE),
]

EQUIPMENT_TIERS: list[tuple[int | None, EquipmentCondition]] = [
    (9, EquipmentCondition.NONE),
    (49, EquipmentCondition.BROKEN),
    (74, EquipmentCondition.DAMAGED),
    (89, EquipmentCondition.WORN),
    (96, EquipmentCondition.GOOD),
    (None, EquipmentCondition.PERFECT),
]


def check_range(value: int, field: str) -> int:
    """Reject anything that is not an int in [0, 99]."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInputError(f"{field} must be an integer, got {value!r}", slot=field)
    if not STAT_MIN <= value <= STAT_MAX:
        raise MalformedInputError(
            f"{field} must be within [{STAT_MIN}, {STAT_MAX}], got {value}", slot=field
        )
    return value


def lookup(table, value: int):
    """Return the label of the first bucket whose inclusive upper bound holds value."""
    for upper, label in table:
        if upper is None or value <= upper:
            return label
    raise LookupError(f"No bucket for {value}")  # tables always end with a catch-all


def resolve_wearable_condition(statistic: int) -> WearableCondition:
    return lookup(WEARABLE_TIERS, check_range(statistic, "statistic"))


def resolve_equipment_condition(statistic: int) -> EquipmentCondition:
    return lookup(EQUIPMENT_TIERS, check_range(statistic, "statistic"))


def is_lowest(condition: WearableCondition | EquipmentCondition) -> bool:
    """True for Basic / None, the tiers that carry no styled asset."""
    return condition in (WearableCondition.BASIC, EquipmentCondition.NONE)

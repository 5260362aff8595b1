"""Trait name selection from 2-digit selectors.

Appearance slots (beard, body, face, top) map a selector straight to a name.
Equipment slots (boots, bottoms, helmet, shield, weapon) also take the slot's
condition: at the lowest tier the name is the tier label itself ("Basic" or
"None") and the selector is ignored.

Buckets are (upper_bound, name) with inclusive bounds, ascending; a None
bound is the catch-all.

Note: the upstream generator only produces beard selectors in [10, 99], so
the "01" beard bucket is over-weighted. Minted Vikings already depend on
this, so the table is kept as is.
"""

from .conditions import (
    EquipmentCondition,
    WearableCondition,
    check_range,
    is_lowest,
    lookup,
)

BEARD_TYPES = [(29, "01"), (49, "02"), (69, "03"), (89, "04"), (None, "05")]
BODY_TYPES = [(19, "Devil"), (39, "Pink"), (59, "Robot"), (79, "White"), (None, "Zombie")]
FACE_TYPES = [(19, "01"), (39, "02"), (59, "03"), (79, "04"), (None, "05")]
TOP_TYPES = [(19, "01"), (39, "02"), (59, "03"), (79, "04"), (None, "05")]

BOOTS_TYPES = [(32, "Blue"), (65, "Green"), (None, "Red")]
BOTTOMS_TYPES = [(32, "Blue"), (65, "Green"), (None, "Red")]
HELMET_TYPES = [(32, "Green Horned"), (65, "Green"), (None, "Red Horned")]
SHIELD_TYPES = [(None, "Placeholder")]
WEAPON_TYPES = [(None, "Placeholder")]


def _select(table, selector: int, slot: str) -> str:
    return lookup(table, check_range(selector, f"{slot} selector"))


def _select_styled(table, selector: int, condition, slot: str) -> str:
    if is_lowest(condition):
        check_range(selector, f"{slot} selector")
        return condition.value
    return _select(table, selector, slot)


# ── Appearance ───────────────────────────────────────────


def resolve_beard_type(selector: int) -> str:
    return _select(BEARD_TYPES, selector, "beard")


def resolve_body_type(selector: int) -> str:
    return _select(BODY_TYPES, selector, "body")


def resolve_face_type(selector: int) -> str:
    return _select(FACE_TYPES, selector, "face")


def resolve_top_type(selector: int) -> str:
    return _select(TOP_TYPES, selector, "top")


# ── Wearables ────────────────────────────────────────────


def resolve_boots_type(selector: int, condition: WearableCondition) -> str:
    return _select_styled(BOOTS_TYPES, selector, condition, "boots")


def resolve_bottoms_type(selector: int, condition: WearableCondition) -> str:
    return _select_styled(BOTTOMS_TYPES, selector, condition, "bottoms")


# ── Equipment ────────────────────────────────────────────


def resolve_helmet_type(selector: int, condition: EquipmentCondition) -> str:
    return _select_styled(HELMET_TYPES, selector, condition, "helmet")


def resolve_shield_type(selector: int, condition: EquipmentCondition) -> str:
    return _select_styled(SHIELD_TYPES, selector, condition, "shield")


def resolve_weapon_type(selector: int, condition: EquipmentCondition) -> str:
    return _select_styled(WEAPON_TYPES, selector, condition, "weapon")


APPEARANCE_TABLES = {
    "beard": BEARD_TYPES,
    "body": BODY_TYPES,
    "face": FACE_TYPES,
    "top": TOP_TYPES,
}

STYLED_TABLES = {
    "boots": BOOTS_TYPES,
    "bottoms": BOTTOMS_TYPES,
    "helmet": HELMET_TYPES,
    "shield": SHIELD_TYPES,
    "weapon": WEAPON_TYPES,
}


def known_names(slot: str) -> list[str]:
    """Every name a slot can resolve to, lowest-tier label first for styled slots."""
    if slot in APPEARANCE_TABLES:
        table = APPEARANCE_TABLES[slot]
        lowest = []
    else:
        table = STYLED_TABLES[slot]
        lowest = ["Basic"] if slot in ("boots", "bottoms") else ["None"]
    names = lowest + [name for _, name in table]
    return list(dict.fromkeys(names))

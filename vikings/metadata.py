"""OpenSea-compatible metadata for stored Vikings.

Attribute order is fixed: Beard, Body, Face, Top, then for each equipment
slot its Type, Condition and statistic (statistics carry max_value 99).
"""

from typing import Any

from .conditions import STAT_MAX

# (slot, display name, statistic field, statistic display name)
EQUIPMENT_ATTRIBUTES = [
    ("boots", "Boots", "speed", "Speed"),
    ("bottoms", "Bottoms", "stamina", "Stamina"),
    ("helmet", "Helmet", "intelligence", "Intelligence"),
    ("shield", "Shield", "defence", "Defence"),
    ("weapon", "Weapon", "attack", "Attack"),
]

APPEARANCE_ATTRIBUTES = [
    ("beard", "Beard"),
    ("body", "Body"),
    ("face", "Face"),
    ("top", "Top"),
]


def build_attributes(stored: dict[str, Any]) -> list[dict[str, Any]]:
    attributes: list[dict[str, Any]] = []
    for slot, label in APPEARANCE_ATTRIBUTES:
        attributes.append({"trait_type": label, "value": stored[f"{slot}_name"]})
    for slot, label, stat, stat_label in EQUIPMENT_ATTRIBUTES:
        attributes.append({"trait_type": f"{label} Type", "value": stored[f"{slot}_name"]})
        attributes.append({"trait_type": f"{label} Condition", "value": stored[f"{slot}_condition"]})
        attributes.append({"trait_type": stat_label, "value": stored[stat], "max_value": STAT_MAX})
    return attributes


def to_broadcast(stored: dict[str, Any], external_url: str) -> dict[str, Any]:
    """Convert a stored Viking record into its public metadata."""
    return {
        "name": stored["name"],
        "image": stored["image"],
        "description": stored["description"],
        "external_link": f"{external_url.rstrip('/')}/viking/{stored['number']}",
        "attributes": build_attributes(stored),
    }


def project(record: dict[str, Any], select: list[str] | None) -> dict[str, Any]:
    """Apply a projection list to a record.

    "-key" entries omit keys; otherwise plain entries pick keys. When both
    kinds are given the omissions win and the picks are ignored.
    """
    if not select:
        return dict(record)
    omit = [key[1:] for key in select if key.startswith("-")]
    pick = [key for key in select if not key.startswith("-")]
    if omit:
        return {k: v for k, v in record.items() if k not in omit}
    return {k: v for k, v in record.items() if k in pick}

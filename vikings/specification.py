"""Asset specification: raw contract numbers → traits, conditions and part paths.

The specification is the single intermediate record both the image compositor
and the metadata/storage layers consume. It is a pure function of the raw
input, the Viking number and the asset configuration.

Appearance layout (8 digits, zero-padded):

    15 03 27 04
    │  │  │  └─ top
    │  │  └──── face
    │  └─────── body
    └────────── beard

Part tree layout under parts_root:

    beards/beard_{name}.png
    bodies/body_{name}.png
    faces/face_{name}.png
    tops/top_{name}.png
    boots/boots_basic.png                       (Basic condition)
    boots/{type}/boots_{type}_{condition}.png
    bottoms/bottoms_basic.png                   (Basic condition)
    bottoms/{type}/bottoms_{type}_{condition}.png
    helmets/{type}/helmet_{type}_{condition}.png   (absent at None)
    shields/{type}/shield_{type}_{condition}.png   (absent at None)
    weapons/{type}/weapon_{type}_{condition}.png   (absent at None)
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from .conditions import (
    EquipmentCondition,
    WearableCondition,
    check_range,
    is_lowest,
    resolve_equipment_condition,
    resolve_wearable_condition,
)
from .errors import MalformedInputError
from .traits import (
    resolve_beard_type,
    resolve_body_type,
    resolve_boots_type,
    resolve_bottoms_type,
    resolve_face_type,
    resolve_helmet_type,
    resolve_shield_type,
    resolve_top_type,
    resolve_weapon_type,
)

APPEARANCE_DIGITS = 8

APPEARANCE_SLOTS = ("beard", "body", "face", "top")

# Background-most first; later layers render on top.
LAYER_ORDER = ("body", "face", "top", "beard", "bottoms", "boots", "helmet", "shield", "weapon")

PART_DIRS = {
    "beard": "beards",
    "body": "bodies",
    "face": "faces",
    "top": "tops",
    "boots": "boots",
    "bottoms": "bottoms",
    "helmet": "helmets",
    "shield": "shields",
    "weapon": "weapons",
}

# equipment slot → statistic that sets its condition
SLOT_STATS = {
    "boots": "speed",
    "bottoms": "stamina",
    "helmet": "intelligence",
    "shield": "defence",
    "weapon": "attack",
}

Selector = Annotated[int, Field(ge=0, le=99)]


class RawTraitInput(BaseModel):
    """Contract payload for one Viking. Every value except appearance is 0-99."""

    model_config = ConfigDict(frozen=True)

    appearance: int = Field(ge=0)
    boots: Selector
    speed: Selector
    bottoms: Selector
    stamina: Selector
    helmet: Selector
    intelligence: Selector
    shield: Selector
    defence: Selector
    weapon: Selector
    attack: Selector


class AssetConfig(BaseModel):
    """Where part images live and where composed images are served from."""

    model_config = ConfigDict(frozen=True)

    parts_root: Path
    base_uri: str


class TraitNames(BaseModel):
    model_config = ConfigDict(frozen=True)

    beard: str
    body: str
    face: str
    top: str
    boots: str
    bottoms: str
    helmet: str
    shield: str
    weapon: str


class Conditions(BaseModel):
    model_config = ConfigDict(frozen=True)

    boots: WearableCondition
    bottoms: WearableCondition
    helmet: EquipmentCondition
    shield: EquipmentCondition
    weapon: EquipmentCondition


class Stats(BaseModel):
    model_config = ConfigDict(frozen=True)

    attack: int
    defence: int
    intelligence: int
    speed: int
    stamina: int


class FilePaths(BaseModel):
    """Part image per slot. helmet/shield/weapon are None when nothing is worn."""

    model_config = ConfigDict(frozen=True)

    beard: Path
    body: Path
    face: Path
    top: Path
    boots: Path
    bottoms: Path
    helmet: Path | None = None
    shield: Path | None = None
    weapon: Path | None = None


class AssetSpecification(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int
    image_url: str
    names: TraitNames
    conditions: Conditions
    stats: Stats
    file_paths: FilePaths

    def layers(self) -> list[tuple[str, Path]]:
        """Present part paths in compositing order."""
        result = []
        for slot in LAYER_ORDER:
            path = getattr(self.file_paths, slot)
            if path is not None:
                result.append((slot, path))
        return result


def clean_name(name: str) -> str:
    """Lower-case, whitespace and hyphens to underscores: "Green Horned" → "green_horned"."""
    return re.sub(r"[\s-]", "_", name).lower()


def split_appearance(appearance: int) -> tuple[int, int, int, int]:
    """Split an appearance value into (beard, body, face, top) selectors."""
    if isinstance(appearance, bool) or not isinstance(appearance, int) or appearance < 0:
        raise MalformedInputError(f"appearance must be a non-negative integer, got {appearance!r}",
                                  slot="appearance")
    digits = f"{appearance:0{APPEARANCE_DIGITS}d}"
    if len(digits) != APPEARANCE_DIGITS:
        raise MalformedInputError(
            f"appearance must have {APPEARANCE_DIGITS} digits, got {len(digits)}",
            slot="appearance",
        )
    beard, body, face, top = (int(digits[i:i + 2]) for i in range(0, APPEARANCE_DIGITS, 2))
    return beard, body, face, top


def image_file_name(number: int) -> str:
    return f"viking_{number}.png"


def _styled_path(parts_root: Path, slot: str, name: str, condition) -> Path:
    type_ = clean_name(name)
    return parts_root / PART_DIRS[slot] / type_ / f"{slot}_{type_}_{clean_name(condition.value)}.png"


def build_specification(number: int, raw: RawTraitInput, config: AssetConfig) -> AssetSpecification:
    """Resolve every trait, condition and part path for one Viking.

    Raises MalformedInputError if the appearance cannot be split into four
    digit pairs or any selector/statistic falls outside [0, 99].
    """
    try:
        beard_sel, body_sel, face_sel, top_sel = split_appearance(raw.appearance)
        for field in ("boots", "bottoms", "helmet", "shield", "weapon", *SLOT_STATS.values()):
            check_range(getattr(raw, field), field)
    except MalformedInputError as e:
        raise MalformedInputError(e.message, number=number, slot=e.slot) from e

    conditions = Conditions(
        boots=resolve_wearable_condition(raw.speed),
        bottoms=resolve_wearable_condition(raw.stamina),
        helmet=resolve_equipment_condition(raw.intelligence),
        shield=resolve_equipment_condition(raw.defence),
        weapon=resolve_equipment_condition(raw.attack),
    )

    names = TraitNames(
        beard=resolve_beard_type(beard_sel),
        body=resolve_body_type(body_sel),
        face=resolve_face_type(face_sel),
        top=resolve_top_type(top_sel),
        boots=resolve_boots_type(raw.boots, conditions.boots),
        bottoms=resolve_bottoms_type(raw.bottoms, conditions.bottoms),
        helmet=resolve_helmet_type(raw.helmet, conditions.helmet),
        shield=resolve_shield_type(raw.shield, conditions.shield),
        weapon=resolve_weapon_type(raw.weapon, conditions.weapon),
    )

    root = config.parts_root
    paths: dict[str, Path | None] = {}
    for slot in APPEARANCE_SLOTS:
        paths[slot] = root / PART_DIRS[slot] / f"{slot}_{clean_name(getattr(names, slot))}.png"

    for slot in ("boots", "bottoms"):
        condition = getattr(conditions, slot)
        if is_lowest(condition):
            paths[slot] = root / PART_DIRS[slot] / f"{slot}_basic.png"
        else:
            paths[slot] = _styled_path(root, slot, getattr(names, slot), condition)

    for slot in ("helmet", "shield", "weapon"):
        condition = getattr(conditions, slot)
        if is_lowest(condition):
            paths[slot] = None
        else:
            paths[slot] = _styled_path(root, slot, getattr(names, slot), condition)

    return AssetSpecification(
        number=number,
        image_url=f"{config.base_uri.rstrip('/')}/{image_file_name(number)}",
        names=names,
        conditions=conditions,
        stats=Stats(
            attack=raw.attack,
            defence=raw.defence,
            intelligence=raw.intelligence,
            speed=raw.speed,
            stamina=raw.stamina,
        ),
        file_paths=FilePaths(**paths),
    )

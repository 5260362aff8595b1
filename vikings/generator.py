"""Synthetic contract payloads for local generation runs.

Mirrors the upstream generator so Vikings can be produced without a chain
connection. The beard selector is drawn from [10, 99] because upstream
concatenates it unpadded in front of the other three pairs; keeping that
range keeps synthetic distributions comparable to minted ones.
"""

import random

from .specification import RawTraitInput

BEARD_MIN = 10


def _pair(value: int) -> str:
    return f"{value:02d}"


def generate_raw_input(rng: random.Random | None = None) -> RawTraitInput:
    rng = rng or random.Random()
    beard = rng.randint(BEARD_MIN, 99)
    body, face, top = (rng.randint(0, 99) for _ in range(3))
    appearance = int(f"{beard}{_pair(body)}{_pair(face)}{_pair(top)}")
    fields = ("boots", "speed", "bottoms", "stamina", "helmet", "intelligence",
              "shield", "defence", "weapon", "attack")
    return RawTraitInput(appearance=appearance, **{f: rng.randint(0, 99) for f in fields})

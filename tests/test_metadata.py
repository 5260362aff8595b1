"""Tests for OpenSea metadata formatting and projection."""

import json

from vikings.metadata import project, to_broadcast

STORED = {
    "number": 7,
    "name": "Viking #7",
    "image": "http://api.test/api/static/viking_7.png",
    "description": "A unique and special viking",
    "beard_name": "01",
    "body_name": "Devil",
    "face_name": "02",
    "top_name": "01",
    "boots_name": "Green",
    "boots_condition": "Used",
    "speed": 80,
    "bottoms_name": "Basic",
    "bottoms_condition": "Basic",
    "stamina": 5,
    "helmet_name": "Green Horned",
    "helmet_condition": "Damaged",
    "intelligence": 60,
    "shield_name": "None",
    "shield_condition": "None",
    "defence": 3,
    "weapon_name": "Placeholder",
    "weapon_condition": "Perfect",
    "attack": 97,
}


def test_attribute_order():
    record = to_broadcast(STORED, "http://vikings.test")
    assert [a["trait_type"] for a in record["attributes"]] == [
        "Beard", "Body", "Face", "Top",
        "Boots Type", "Boots Condition", "Speed",
        "Bottoms Type", "Bottoms Condition", "Stamina",
        "Helmet Type", "Helmet Condition", "Intelligence",
        "Shield Type", "Shield Condition", "Defence",
        "Weapon Type", "Weapon Condition", "Attack",
    ]


def test_max_value_only_on_statistics():
    record = to_broadcast(STORED, "http://vikings.test")
    with_max = [a["trait_type"] for a in record["attributes"] if "max_value" in a]
    assert with_max == ["Speed", "Stamina", "Intelligence", "Defence", "Attack"]
    assert all(a["max_value"] == 99 for a in record["attributes"] if "max_value" in a)


def test_attribute_values():
    attrs = {a["trait_type"]: a["value"] for a in to_broadcast(STORED, "x")["attributes"]}
    assert attrs["Body"] == "Devil"
    assert attrs["Helmet Type"] == "Green Horned"
    assert attrs["Shield Condition"] == "None"
    assert attrs["Attack"] == 97


def test_header_fields():
    record = to_broadcast(STORED, "http://vikings.test/")
    assert record["name"] == "Viking #7"
    assert record["image"] == STORED["image"]
    assert record["description"] == "A unique and special viking"
    assert record["external_link"] == "http://vikings.test/viking/7"


def test_broadcast_keys():
    record = to_broadcast(STORED, "http://vikings.test")
    assert list(record) == ["name", "image", "description", "external_link", "attributes"]


def test_deterministic_output():
    a = json.dumps(to_broadcast(STORED, "http://vikings.test"))
    b = json.dumps(to_broadcast(dict(STORED), "http://vikings.test"))
    assert a == b


# ── Projection ───────────────────────────────────────────


def test_project_pick():
    assert project({"a": 1, "b": 2, "c": 3}, ["a", "c"]) == {"a": 1, "c": 3}


def test_project_omit():
    assert project({"a": 1, "b": 2, "c": 3}, ["-b"]) == {"a": 1, "c": 3}


def test_project_omit_wins_over_pick():
    assert project({"a": 1, "b": 2}, ["a", "-b"]) == {"a": 1}


def test_project_empty_returns_copy():
    record = {"a": 1}
    result = project(record, [])
    assert result == record
    assert result is not record

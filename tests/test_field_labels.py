from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from field_labels import (
    EXCLUDED_KEYS,
    EXCLUDED_LABELS,
    FIELD_LABELS,
    FORCED_INPUT_LABELS,
    FieldLabelMap,
)


def test_every_input_key_has_one_unique_label() -> None:
    keys = ["model", "refrigerant", "evap_temp", "cond_temp", "superheat", "speed"]
    assert FIELD_LABELS.keys() == keys
    labels = [FIELD_LABELS.label_for(k) for k in keys]
    assert len(set(labels)) == len(keys)


def test_lookup_works_both_ways() -> None:
    assert FIELD_LABELS.label_for("evap_temp") == "Evaporation Temperature (°C)"
    assert FIELD_LABELS.key_for("Speed (RPM)") == "speed"


def test_unmapped_names_map_to_themselves() -> None:
    assert FIELD_LABELS.label_for("Discharge Pressure") == "Discharge Pressure"
    assert FIELD_LABELS.key_for("Discharge Pressure") == "Discharge Pressure"
    assert not FIELD_LABELS.has_key("Discharge Pressure")


def test_duplicate_labels_are_rejected() -> None:
    with pytest.raises(ValueError):
        FieldLabelMap([("a", "Same"), ("b", "Same")])


def test_duplicate_keys_are_rejected() -> None:
    with pytest.raises(ValueError):
        FieldLabelMap([("a", "One"), ("a", "Two")])


def test_forced_labels_are_the_operating_parameters() -> None:
    assert FORCED_INPUT_LABELS == {
        "Evaporation Temperature (°C)",
        "Condenser Temperature (°C)",
        "Superheat (°C)",
        "Speed (RPM)",
    }


def test_excluded_labels_cover_excluded_keys() -> None:
    assert EXCLUDED_KEYS <= EXCLUDED_LABELS

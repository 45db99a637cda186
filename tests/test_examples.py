import json
import logging

import pytest

from revolutionviewer.model.examples import ExamplePreset, load_examples
from revolutionviewer.model.expression import parse_formula
from revolutionviewer.model.interval import parse_localized_number


def test_bundled_presets_load():
    presets = load_examples()
    assert len(presets) >= 5
    labels = [p.label for p in presets]
    assert "Paraboloid" in labels


def test_bundled_presets_are_valid():
    for preset in load_examples():
        parse_formula(preset.formula)
        assert parse_localized_number(preset.a) is not None
        assert parse_localized_number(preset.b) is not None


def test_round_trip_through_dict():
    preset = ExamplePreset(label="Cone", formula="x", a="0", b="3")
    assert ExamplePreset.from_dict(preset.to_dict()) == preset


def test_label_defaults_to_formula():
    preset = ExamplePreset.from_dict({"formula": "x^3", "a": 0, "b": 1.5})
    assert preset.label == "x^3"
    assert (preset.a, preset.b) == ("0", "1.5")


def test_missing_field():
    with pytest.raises(KeyError):
        ExamplePreset.from_dict({"label": "x", "a": "0"})


def test_bad_records_are_skipped(tmp_path):
    path = tmp_path / "examples.json"
    path.write_text(json.dumps([
        {"label": "ok", "formula": "x", "a": "0", "b": "1"},
        {"label": "no bounds", "formula": "x"},
        "not a record",
    ]), encoding="utf-8")

    presets = load_examples(str(path))
    assert [p.label for p in presets] == ["ok"]


def test_malformed_json(tmp_path, caplog):
    path = tmp_path / "examples.json"
    path.write_text("[{", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="revolutionviewer"):
        assert load_examples(str(path)) == []
    assert "Could not load examples" in caplog.text


def test_missing_file(tmp_path):
    assert load_examples(str(tmp_path / "nope.json")) == []


def test_not_a_list(tmp_path):
    path = tmp_path / "examples.json"
    path.write_text('{"formula": "x"}', encoding="utf-8")
    assert load_examples(str(path)) == []

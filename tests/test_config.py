import json

import pytest

from bucketdraw.config import DrawConfig, load_configuration
from bucketdraw.constants import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH
from bucketdraw.exceptions import ConfigurationException


def test_defaults():
    config = DrawConfig()
    assert config.input_path == DEFAULT_INPUT_PATH
    assert config.output_path == DEFAULT_OUTPUT_PATH
    assert config.seed is None
    assert config.output_format == "text"
    assert config.strict is False


def test_round_trip_through_dict():
    config = DrawConfig(input_path="in.txt", seed=4, output_format="json")
    assert DrawConfig.from_dict(config.to_dict()) == config


def test_merged_ignores_none_overrides():
    config = DrawConfig(input_path="in.txt", seed=4)
    merged = config.merged({"input_path": None, "output_path": "out.txt", "seed": 9})
    assert merged.input_path == "in.txt"
    assert merged.output_path == "out.txt"
    assert merged.seed == 9


def test_invalid_values_rejected():
    with pytest.raises(ConfigurationException):
        DrawConfig(output_format="xml")
    with pytest.raises(ConfigurationException):
        DrawConfig(seed="abc")
    with pytest.raises(ConfigurationException):
        DrawConfig(seed=True)


def test_load_configuration(tmp_path):
    path = tmp_path / "draw.json"
    path.write_text(
        json.dumps({"input_path": "teams.txt", "seed": 11, "colour": "blue"}),
        encoding="utf-8",
    )
    config = load_configuration(path)
    assert config.input_path == "teams.txt"
    assert config.seed == 11
    assert config.output_path == DEFAULT_OUTPUT_PATH


@pytest.mark.parametrize("content", ["not json", "[1, 2]"])
def test_load_configuration_malformed(tmp_path, content):
    path = tmp_path / "draw.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationException):
        load_configuration(path)


def test_load_configuration_missing(tmp_path):
    with pytest.raises(ConfigurationException):
        load_configuration(tmp_path / "missing.json")


def test_load_configuration_rejects_boolean_seed(tmp_path):
    path = tmp_path / "draw.json"
    path.write_text(json.dumps({"seed": True}), encoding="utf-8")
    with pytest.raises(ConfigurationException):
        load_configuration(path)

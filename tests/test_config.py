import logging

import pytest
from pydantic import ValidationError

from common.config import DEFAULT_CONFIG, PopulatorConfig, get_log_level_name, load_config
from common.io_utils import parse_log_level, read_json, safe_name, write_json


ENV_KEYS = (
    "MAPGEN_SEED",
    "MAPGEN_WINDOW_SKIP_PROBABILITY",
    "MAPGEN_CABINET_PROBABILITY",
    "MAPGEN_MAX_SETTLE_PASSES",
    "MAPGEN_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # no stray .env from the working directory
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        # setenv first so values loaded from .env are undone afterwards
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


def test_defaults(clean_env):
    config = load_config()
    assert config == DEFAULT_CONFIG
    assert config.seed is None
    assert config.kitchen_appliances == ["O", "B", "S", "S", "S"]


def test_environment_overrides(clean_env):
    clean_env.setenv("MAPGEN_SEED", "17")
    clean_env.setenv("MAPGEN_CABINET_PROBABILITY", "0.25")
    config = load_config()
    assert config.seed == 17
    assert config.cabinet_probability == 0.25


def test_explicit_overrides_win(clean_env):
    clean_env.setenv("MAPGEN_SEED", "17")
    assert load_config(seed=3).seed == 3


def test_dotenv_file_is_read(clean_env, tmp_path):
    (tmp_path / ".env").write_text("MAPGEN_MAX_SETTLE_PASSES=2\n")
    assert load_config().max_settle_passes == 2


def test_out_of_range_values_are_rejected(clean_env):
    clean_env.setenv("MAPGEN_CABINET_PROBABILITY", "1.5")
    with pytest.raises(ValidationError):
        load_config()
    with pytest.raises(ValidationError):
        PopulatorConfig(max_settle_passes=0)


def test_log_level_name(clean_env):
    assert get_log_level_name() == "INFO"
    clean_env.setenv("MAPGEN_LOG_LEVEL", "debug")
    assert parse_log_level(get_log_level_name()) == logging.DEBUG
    assert parse_log_level("nonsense") == logging.INFO
    assert parse_log_level(None, logging.WARNING) == logging.WARNING


def test_safe_name():
    assert safe_name("2") == "floor_2"
    assert safe_name("roof top") == "roof_top"


def test_json_round_trip(tmp_path):
    path = tmp_path / "out" / "map.json"
    write_json({"layout": ["#E#"], "theme": "居酒屋"}, path)
    assert read_json(path) == {"layout": ["#E#"], "theme": "居酒屋"}

import json

import pytest

from quine_mccluskey.config import SolverConfig
from quine_mccluskey.errors import ConfigError


def test_defaults():
    config = SolverConfig.from_env_or_file({})
    assert config == SolverConfig(strict_coverage=False, comfort_variables=8)


def test_env_overrides():
    config = SolverConfig.from_env_or_file({
        "QMC_STRICT_COVERAGE": "yes",
        "QMC_COMFORT_VARIABLES": "10",
    })
    assert config.strict_coverage is True
    assert config.comfort_variables == 10


def test_env_takes_precedence_over_file(tmp_path):
    path = tmp_path / "qmc.json"
    path.write_text(json.dumps({"comfort_variables": 3}))
    config = SolverConfig.from_env_or_file({
        "QMC_STRICT_COVERAGE": "1",
        "QMC_CONFIG_PATH": str(path),
    })
    assert config.strict_coverage is True
    assert config.comfort_variables == 8


def test_file(tmp_path):
    path = tmp_path / "qmc.json"
    path.write_text(json.dumps({"strict_coverage": True, "comfort_variables": 6}))
    config = SolverConfig.from_env_or_file({"QMC_CONFIG_PATH": str(path)})
    assert config == SolverConfig(strict_coverage=True, comfort_variables=6)


@pytest.mark.parametrize("env", [
    {"QMC_STRICT_COVERAGE": "maybe"},
    {"QMC_COMFORT_VARIABLES": "many"},
    {"QMC_COMFORT_VARIABLES": "-2"},
    {"QMC_CONFIG_PATH": "/nonexistent/qmc.json"},
])
def test_bad_values(env):
    with pytest.raises(ConfigError):
        SolverConfig.from_env_or_file(env)


def test_malformed_file(tmp_path):
    path = tmp_path / "qmc.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError):
        SolverConfig.from_env_or_file({"QMC_CONFIG_PATH": str(path)})

    path.write_text("[1, 2]")
    with pytest.raises(ConfigError):
        SolverConfig.from_env_or_file({"QMC_CONFIG_PATH": str(path)})

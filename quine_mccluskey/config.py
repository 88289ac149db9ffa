import dataclasses
import json
import os
from typing import Any, Dict, Optional

from quine_mccluskey.errors import ConfigError

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    word = str(raw).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _parse_int(name: str, raw: Any) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ConfigError(f"{name} must be >= 0, got {value}")
    return value


@dataclasses.dataclass
class SolverConfig:
    strict_coverage: bool = False
    # Above this many variables a performance warning is logged
    comfort_variables: int = 8

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'SolverConfig':
        config = SolverConfig()
        if "strict_coverage" in data:
            config.strict_coverage = _parse_bool("strict_coverage", data["strict_coverage"])
        if "comfort_variables" in data:
            config.comfort_variables = _parse_int("comfort_variables", data["comfort_variables"])
        return config

    @staticmethod
    def from_env_or_file(environ: Optional[Dict[str, str]] = None) -> 'SolverConfig':
        env = os.environ if environ is None else environ

        # 1. Env vars
        overrides: Dict[str, Any] = {}
        if "QMC_STRICT_COVERAGE" in env:
            overrides["strict_coverage"] = env["QMC_STRICT_COVERAGE"]
        if "QMC_COMFORT_VARIABLES" in env:
            overrides["comfort_variables"] = env["QMC_COMFORT_VARIABLES"]
        if overrides:
            return SolverConfig.from_dict(overrides)

        # 2. Config path
        config_path = env.get("QMC_CONFIG_PATH")
        if config_path:
            try:
                with open(config_path, 'r', encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as exc:
                raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
            if not isinstance(data, dict):
                raise ConfigError(f"Config file {config_path} must hold a JSON object")
            return SolverConfig.from_dict(data)

        # Default
        return SolverConfig()

"""Generator configuration: plugin parameters and YAML config files."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Final

import yaml

from .errors import ConfigurationError, DescriptorError

# Options accepted through --twirp_ruby_opt
PLUGIN_FLAGS: Final[dict[str, str]] = {
    "skip-empty": "skip_empty",
    "parallel": "parallel",
}

CONFIG_KEYS: Final[frozenset[str]] = frozenset({
    "descriptor_set",
    "files",
    "out",
    "skip_empty",
    "parallel",
    "workers",
})


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """Knobs that change what a generation run emits or how it runs."""

    skip_empty: bool = False
    parallel: bool = False
    max_workers: int | None = None

    def merged(self, **overrides: Any) -> GeneratorOptions:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def parse_parameter(parameter: str) -> GeneratorOptions:
    """Parse the comma-separated plugin parameter string.

    Examples:
        >>> parse_parameter("skip-empty")
        GeneratorOptions(skip_empty=True, parallel=False, max_workers=None)

    Raises:
        ConfigurationError: On an unknown option or a bad ``workers`` value.
    """
    values: dict[str, Any] = {}
    for raw in parameter.split(","):
        option = raw.strip()
        if not option:
            continue
        key, _, value = option.partition("=")
        if key in PLUGIN_FLAGS and not value:
            values[PLUGIN_FLAGS[key]] = True
        elif key == "workers" and value:
            values["max_workers"] = _positive_int(value, "workers")
        else:
            raise ConfigurationError(f"Unknown plugin option '{option}'")
    return GeneratorOptions(**values)


def _positive_int(value: Any, key: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"'{key}' must be an integer, got {value!r}") from None
    if number < 1:
        raise ConfigurationError(f"'{key}' must be at least 1, got {number}")
    return number


def load_config(config_path: Path) -> dict[str, Any]:
    """Load and validate a generation config from a YAML file.

    Raises:
        DescriptorError: If the file cannot be read or parsed.
        ConfigurationError: If the content has the wrong shape.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DescriptorError(f"Failed to read config file: {e}", str(config_path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DescriptorError(f"Invalid YAML: {e}", str(config_path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("Config root must be a mapping", str(config_path))

    unknown = sorted(set(data) - CONFIG_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {', '.join(unknown)}", str(config_path))

    files = data.get("files")
    if files is not None and (
        not isinstance(files, list) or not all(isinstance(f, str) for f in files)
    ):
        raise ConfigurationError("'files' must be a list of strings", str(config_path))

    return data


def options_from_config(data: dict[str, Any]) -> GeneratorOptions:
    """Build GeneratorOptions from a loaded config mapping."""
    workers = data.get("workers")
    return GeneratorOptions(
        skip_empty=bool(data.get("skip_empty", False)),
        parallel=bool(data.get("parallel", False)),
        max_workers=_positive_int(workers, "workers") if workers is not None else None,
    )

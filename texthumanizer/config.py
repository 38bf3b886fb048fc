"""Configuration model and loaders for Text Humanizer.

Responsibilities:
- Define command configuration as a typed dataclass.
- Provide deterministic precedence resolution for rule option flags.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `HumanizerConfig`: option defaults and input handling for one command run.
- `RuntimeConfigSources`: optional value sources for precedence resolution.
- `ConfigLoader`: static construction helpers for `HumanizerConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import OPTION_FIELDS, HumanizeOptions, resolve_option_field
from .parsing import normalize_optional_string, parse_required_boolean

ENV_PREFIX = "HUMANIZER_"
_STRIP_INPUT_KEY = "strip_input"


def env_key_for(field_name: str) -> str:
    """Return the environment variable name for a config field."""

    return f"{ENV_PREFIX}{field_name.upper()}"


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Source mappings used for deterministic option precedence.

    Attributes:
        cli: Flag values explicitly provided by CLI arguments, keyed by field name.
        env: Values loaded from environment variables, keyed by variable name.
    """

    cli: Mapping[str, bool] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class HumanizerConfig:
    """Configuration for one command run.

    Attributes:
        options: Rule option defaults loaded from a config file or built-ins.
        strip_input: Whether leading/trailing whitespace is trimmed before processing.
        runtime_sources: Optional runtime source overrides injected by CLI.
    """

    options: HumanizeOptions = field(default_factory=HumanizeOptions)
    strip_input: bool = True
    runtime_sources: RuntimeConfigSources = field(default_factory=RuntimeConfigSources)

    def resolved_options(self, sources: RuntimeConfigSources | None = None) -> HumanizeOptions:
        """Resolve rule options with deterministic source precedence.

        Precedence for each flag is:
        `cli` > `env` > config file value > built-in default.
        """

        resolved_sources = sources if sources is not None else self.runtime_sources
        overrides: dict[str, bool] = {}
        for field_name in OPTION_FIELDS.values():
            value = self._resolve_flag(field_name, resolved_sources)
            if value is not None:
                overrides[field_name] = value
        return HumanizeOptions.from_mapping(overrides, base=self.options)

    def resolved_strip_input(self, sources: RuntimeConfigSources | None = None) -> bool:
        """Resolve the input-trimming preference with the same precedence as options."""

        resolved_sources = sources if sources is not None else self.runtime_sources
        value = self._resolve_flag(_STRIP_INPUT_KEY, resolved_sources)
        return self.strip_input if value is None else value

    @staticmethod
    def _resolve_flag(field_name: str, sources: RuntimeConfigSources) -> bool | None:
        """Return the highest-precedence runtime value for one flag, if any."""

        cli_value = sources.cli.get(field_name)
        if cli_value is not None:
            return bool(cli_value)

        env_key = env_key_for(field_name)
        env_value = normalize_optional_string(sources.env.get(env_key))
        if env_value is not None:
            return parse_required_boolean(env_value, env_key)
        return None


class ConfigLoader:
    """Factory methods for creating `HumanizerConfig` from external sources."""

    _SUPPORTED_ENV_KEYS = frozenset(
        env_key_for(name) for name in (*OPTION_FIELDS.values(), _STRIP_INPUT_KEY)
    )

    @staticmethod
    def from_yaml(path: Path) -> HumanizerConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> HumanizerConfig:
        """Create a validated config from environment variables.

        Option values become config defaults; the raw variables are also kept as
        the `env` runtime source so later CLI overrides still win.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env

        runtime_env = {
            key: value
            for key, value in env_map.items()
            if key in ConfigLoader._SUPPORTED_ENV_KEYS
            and normalize_optional_string(value) is not None
        }
        config = HumanizerConfig(runtime_sources=RuntimeConfigSources(env=runtime_env))
        return HumanizerConfig(
            options=config.resolved_options(),
            strip_input=config.resolved_strip_input(),
            runtime_sources=config.runtime_sources,
        )

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> HumanizerConfig:
        """Build a validated config from a mapping payload."""

        ConfigLoader._validate_keys(payload, source_label)

        option_values: dict[str, bool] = {}
        strip_input = True
        for key, value in payload.items():
            key_text = str(key)
            if key_text == _STRIP_INPUT_KEY:
                strip_input = ConfigLoader._optional_boolean(value, key_text, strip_input)
                continue
            field_name = resolve_option_field(key_text)
            if field_name is None:
                continue
            option_values[field_name] = ConfigLoader._optional_boolean(
                value, key_text, getattr(HumanizeOptions(), field_name)
            )

        return HumanizerConfig(
            options=HumanizeOptions.from_mapping(option_values),
            strip_input=strip_input,
        )

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys that do not name an option or a supported setting."""

        unsupported = sorted(
            str(key)
            for key in payload
            if str(key) != _STRIP_INPUT_KEY and resolve_option_field(str(key)) is None
        )
        if unsupported:
            raise ValueError(
                f"{source_label} has unsupported key(s): {', '.join(unsupported)}."
            )

    @staticmethod
    def _optional_boolean(value: object, key: str, default_value: bool) -> bool:
        """Parse an optional boolean value, keeping `default_value` for blanks."""

        if value is None:
            return default_value
        if not isinstance(value, bool) and normalize_optional_string(value) is None:
            return default_value
        return parse_required_boolean(value, key)

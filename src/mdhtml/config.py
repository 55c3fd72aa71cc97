"""Configuration for a conversion run.

The defaults reproduce the fixed GitHub-flavored option set. A TOML file
passed with ``--config`` may override them, and CLI flags override both.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional

from mdhtml.core import config as core_config
from mdhtml.core.files import DEFAULT_ENCODING, is_known_encoding

from .errors import ConfigError

# Flavor names mapped to markdown-it presets.
FLAVOR_PRESETS: Mapping[str, str] = {
    "github": "gfm-like",
    "commonmark": "commonmark",
}

_DEFAULT_FLAVOR = "github"
_DEFAULT_LOG_LEVEL = "WARNING"
_BOOLEAN_OPTIONS = (
    "simple_line_breaks",
    "open_links_in_new_window",
    "task_lists",
    "header_ids",
    "mentions",
    "emojis",
)


@dataclass(frozen=True)
class ConversionConfig:
    """Options handed to the Markdown converter."""

    flavor: str = _DEFAULT_FLAVOR
    simple_line_breaks: bool = False
    open_links_in_new_window: bool = True
    task_lists: bool = True
    header_ids: bool = True
    mentions: bool = True
    emojis: bool = True

    @property
    def preset(self) -> str:
        try:
            return FLAVOR_PRESETS[self.flavor]
        except KeyError:
            expected = ", ".join(sorted(FLAVOR_PRESETS))
            raise ConfigError(
                f"Unknown flavor '{self.flavor}'. Expected one of: {expected}."
            ) from None


@dataclass(frozen=True)
class MdHtmlSettings:
    """Fully resolved settings for one invocation."""

    conversion: ConversionConfig = field(default_factory=ConversionConfig)
    encoding: str = DEFAULT_ENCODING
    standalone: bool = False
    log_level: str = _DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None


@dataclass(frozen=True)
class ConfigOverrides:
    """CLI-sourced overrides applied on top of file options."""

    standalone: Optional[bool] = None
    log_level: Optional[str] = None
    log_file: Optional[Path] = None


def load_settings(
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[ConfigOverrides] = None,
) -> MdHtmlSettings:
    """Resolve settings applying precedence CLI > TOML > defaults."""

    overrides = overrides or ConfigOverrides()
    table = _default_table()

    if config_path is not None:
        try:
            parsed = core_config.load_toml(config_path.expanduser())
            core_config.merge_defaults(table, parsed)
        except core_config.TomlConfigError as exc:
            raise ConfigError(str(exc)) from exc

    conversion = _build_conversion(table["conversion"])

    encoding = _require_string(table["input"]["encoding"], "input.encoding")
    if not is_known_encoding(encoding):
        raise ConfigError(f"Unknown input.encoding '{encoding}'.")

    standalone = _pick_first(
        overrides.standalone,
        _require_bool(table["output"]["standalone"], "output.standalone"),
    )

    log_level = _resolve_log_level(
        _pick_first(overrides.log_level, table["logging"]["level"])
    )
    log_file = _pick_first(
        overrides.log_file,
        _coerce_optional_path(table["logging"]["file"], config_path),
    )

    return MdHtmlSettings(
        conversion=conversion,
        encoding=encoding,
        standalone=bool(standalone),
        log_level=log_level,
        log_file=log_file,
    )


def _default_table() -> MutableMapping[str, MutableMapping[str, Any]]:
    defaults = ConversionConfig()
    return {
        "conversion": {
            "flavor": defaults.flavor,
            **{name: getattr(defaults, name) for name in _BOOLEAN_OPTIONS},
        },
        "input": {"encoding": DEFAULT_ENCODING},
        "output": {"standalone": False},
        "logging": {"level": _DEFAULT_LOG_LEVEL, "file": ""},
    }


def _build_conversion(table: Mapping[str, Any]) -> ConversionConfig:
    flavor = _require_string(table["flavor"], "conversion.flavor").lower()
    options = {
        name: _require_bool(table[name], f"conversion.{name}")
        for name in _BOOLEAN_OPTIONS
    }
    if flavor not in FLAVOR_PRESETS:
        expected = ", ".join(sorted(FLAVOR_PRESETS))
        raise ConfigError(
            f"Unknown conversion.flavor '{flavor}'. Expected one of: "
            f"{expected}."
        )
    return ConversionConfig(flavor=flavor, **options)


def _require_bool(value: object, key: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false.")
    return value


def _require_string(value: object, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string.")
    return value.strip()


def _resolve_log_level(candidate: object) -> str:
    level = _require_string(candidate, "logging.level").upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigError(f"Unknown logging.level '{candidate}'.")
    return level


def _coerce_optional_path(
    value: object, config_path: Optional[Path]
) -> Optional[Path]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError("logging.file must be a string when provided.")
    raw = value.strip()
    if not raw:
        return None
    path = Path(raw).expanduser()
    if not path.is_absolute() and config_path is not None:
        # Relative log paths are anchored next to the config file.
        path = config_path.expanduser().resolve().parent / path
    return path


def _pick_first(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


__all__ = [
    "FLAVOR_PRESETS",
    "ConversionConfig",
    "MdHtmlSettings",
    "ConfigOverrides",
    "load_settings",
]

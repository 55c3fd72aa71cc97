from __future__ import annotations

from pathlib import Path

import pytest

from mdhtml import config as cfg
from mdhtml.errors import ConfigError


def test_load_settings_defaults_match_github_profile() -> None:
    settings = cfg.load_settings()

    conversion = settings.conversion
    assert conversion.flavor == "github"
    assert conversion.preset == "gfm-like"
    assert conversion.simple_line_breaks is False
    assert conversion.open_links_in_new_window is True
    assert conversion.task_lists is True
    assert conversion.header_ids is True
    assert conversion.mentions is True
    assert conversion.emojis is True
    assert settings.encoding == "utf-8-sig"
    assert settings.standalone is False
    assert settings.log_level == "WARNING"
    assert settings.log_file is None


def test_load_settings_reads_config_file(workspace) -> None:
    config_file = workspace.config(
        """
        [conversion]
        flavor = "CommonMark"
        simple_line_breaks = true
        mentions = false
        emojis = false

        [input]
        encoding = "latin-1"

        [output]
        standalone = true

        [logging]
        level = "info"
        file = "logs/mdhtml.log"
        """
    )

    settings = cfg.load_settings(config_path=config_file)

    assert settings.conversion.flavor == "commonmark"
    assert settings.conversion.preset == "commonmark"
    assert settings.conversion.simple_line_breaks is True
    assert settings.conversion.mentions is False
    assert settings.conversion.emojis is False
    assert settings.conversion.task_lists is True
    assert settings.encoding == "latin-1"
    assert settings.standalone is True
    assert settings.log_level == "INFO"
    assert settings.log_file == workspace.root.resolve() / "logs" / "mdhtml.log"


def test_cli_overrides_win_over_file(workspace, tmp_path: Path) -> None:
    config_file = workspace.config(
        """
        [output]
        standalone = true

        [logging]
        level = "error"
        file = "file.log"
        """
    )
    overrides = cfg.ConfigOverrides(
        standalone=False,
        log_level="debug",
        log_file=tmp_path / "cli.log",
    )

    settings = cfg.load_settings(config_path=config_file, overrides=overrides)

    assert settings.standalone is False
    assert settings.log_level == "DEBUG"
    assert settings.log_file == tmp_path / "cli.log"


def test_missing_config_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        cfg.load_settings(config_path=tmp_path / "missing.toml")

    assert "Config file not found" in str(exc_info.value)


def test_unknown_key_raises(workspace) -> None:
    config_file = workspace.config("[conversion]\nfootnotes = true")

    with pytest.raises(ConfigError) as exc_info:
        cfg.load_settings(config_path=config_file)

    assert "conversion.footnotes" in str(exc_info.value)


def test_unknown_flavor_raises(workspace) -> None:
    config_file = workspace.config('[conversion]\nflavor = "vanilla"')

    with pytest.raises(ConfigError) as exc_info:
        cfg.load_settings(config_path=config_file)

    assert "commonmark, github" in str(exc_info.value)


@pytest.mark.parametrize(
    "body",
    [
        '[conversion]\ntask_lists = "yes"',
        '[input]\nencoding = "no-such-codec"',
        '[input]\nencoding = ""',
        '[logging]\nlevel = "loud"',
        "[logging]\nfile = 3",
        "[output]\nstandalone = 1",
    ],
)
def test_invalid_values_raise(workspace, body: str) -> None:
    config_file = workspace.config(body)

    with pytest.raises(ConfigError):
        cfg.load_settings(config_path=config_file)


def test_invalid_cli_log_level_raises() -> None:
    with pytest.raises(ConfigError):
        cfg.load_settings(overrides=cfg.ConfigOverrides(log_level="chatty"))


def test_empty_log_file_means_no_file(workspace) -> None:
    config_file = workspace.config('[logging]\nfile = "  "')

    settings = cfg.load_settings(config_path=config_file)

    assert settings.log_file is None


def test_conversion_config_is_frozen() -> None:
    conversion = cfg.ConversionConfig()
    with pytest.raises(AttributeError):
        conversion.task_lists = False  # type: ignore[misc]


def test_preset_unknown_flavor_raises() -> None:
    with pytest.raises(ConfigError):
        cfg.ConversionConfig(flavor="bogus").preset

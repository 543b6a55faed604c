from pathlib import Path

import pytest

from symbology import config as config_module
from symbology.config import AppConfig, ConfigError, load_config


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "DEFAULT_ENV_PATH", tmp_path / ".env")
    for name in ("SYMBOLOGY_STRICT_CALENDAR", "SYMBOLOGY_INPUT_FORMAT", "SYMBOLOGY_OUTPUT_FORMAT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_missing_config_file_gives_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.yaml") == AppConfig()


def test_yaml_values_are_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "options:\n"
        "  strict_calendar: true\n"
        "  input_format: activity\n"
        "  output_format: osi-unpadded\n"
        "csv:\n"
        "  symbol_column: contract\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.strict_calendar is True
    assert config.input_format == "activity"
    assert config.output_format == "osi-unpadded"
    assert config.symbol_column == "contract"


def test_environment_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("options:\n  strict_calendar: true\n", encoding="utf-8")
    monkeypatch.setenv("SYMBOLOGY_STRICT_CALENDAR", "no")
    monkeypatch.setenv("SYMBOLOGY_OUTPUT_FORMAT", "osi")

    config = load_config(path)

    assert config.strict_calendar is False
    assert config.output_format == "osi"


def test_dotenv_values_are_used(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "# local overrides\nSYMBOLOGY_STRICT_CALENDAR=\"1\"\n", encoding="utf-8"
    )

    config = load_config(tmp_path / "missing.yaml")

    assert config.strict_calendar is True


def test_invalid_output_format(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("options:\n  output_format: bloomberg\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_boolean(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SYMBOLOGY_STRICT_CALENDAR", "maybe")

    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_non_mapping_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)

from pathlib import Path

from lazyval.config import Config
from lazyval.core.types import LazyMode


def test_race_keys_load_from_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
race_threads: 24
race_delay_ms: 5
race_value: 99
race_mode: single
retry_failures: 2
retry_attempts: 4
""".strip(),
        encoding="utf-8",
    )

    config = Config(config_path=config_file)

    assert config.race.race_threads == 24
    assert config.race.race_delay_ms == 5
    assert config.race.race_value == 99
    assert config.race.race_mode == LazyMode.SINGLE_THREAD
    assert config.race.retry_failures == 2
    assert config.race.retry_attempts == 4


def test_logging_keys_load_from_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        f"""
log_level: debug
log_file: {tmp_path / "out.log"}
debug_mode: true
""".strip(),
        encoding="utf-8",
    )

    config = Config(config_path=config_file)

    assert config.logging.log_level == "DEBUG"
    assert config.logging.log_file == tmp_path / "out.log"
    assert config.developer.debug_mode is True


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    config = Config(config_path=tmp_path / "missing.yaml")

    assert config.race.race_threads == 10
    assert config.race.race_delay_ms == 50
    assert config.race.race_value == 777
    assert config.race.race_mode == LazyMode.MULTI_THREAD
    assert config.logging.log_level == "INFO"
    assert config.developer.debug_mode is False


def test_invalid_section_falls_back_to_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("race_threads: 0\nrace_mode: async\nlog_level: warning\n", encoding="utf-8")

    config = Config(config_path=config_file)

    assert config.race.race_threads == 10
    assert config.race.race_mode == LazyMode.MULTI_THREAD
    assert config.logging.log_level == "WARNING"


def test_non_mapping_yaml_is_ignored(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- just\n- a list\n", encoding="utf-8")

    config = Config(config_path=config_file)

    assert config.race.race_threads == 10


def test_environment_variable_overrides_default_path(tmp_path: Path, monkeypatch) -> None:
    config_file = tmp_path / "env.yaml"
    config_file.write_text("race_value: 5\n", encoding="utf-8")
    monkeypatch.setenv("LAZYVAL_CONFIG", str(config_file))

    config = Config()

    assert config.config_path == config_file
    assert config.race.race_value == 5

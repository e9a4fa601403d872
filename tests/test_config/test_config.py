"""Tests for the YAML/.env/environment configuration loader."""

import os

import pytest  # type: ignore

from config.config import Config, ConfigLoader, load_config


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory so no repo config is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestDefaults:
    def test_defaults_without_files(self):
        config = load_config()
        assert isinstance(config, Config)
        assert config.thresholds.min_volume == 40
        assert config.thresholds.viral_impact_ratio == 1.3
        assert config.engine.max_alerts == 32
        assert config.lifecycle.enabled is True
        assert config.lifecycle.sla_hours.critical == 2.0
        assert config.report.default_timeframe == "todo"
        assert config.logging.service_name == "alert-engine"


class TestYaml:
    def test_explicit_file(self, isolated_cwd):
        path = _write(
            isolated_cwd / "custom.yaml",
            "thresholds:\n  min_volume: 10\nengine:\n  max_workers: 4\n"
            "report:\n  default_timeframe: 24h\n",
        )
        config = load_config(path)
        assert config.thresholds.min_volume == 10
        assert config.engine.max_workers == 4
        assert config.report.default_timeframe == "24h"
        # untouched keys keep defaults
        assert config.thresholds.negativity_pct == 35.0

    def test_discovered_in_config_dir(self, isolated_cwd):
        (isolated_cwd / "config").mkdir()
        _write(isolated_cwd / "config" / "config.yaml", "lifecycle:\n  seed: tenant-a\n")
        assert load_config().lifecycle.seed == "tenant-a"

    def test_empty_file(self, isolated_cwd):
        path = _write(isolated_cwd / "empty.yaml", "")
        assert load_config(path).engine.max_alerts == 32

    def test_missing_explicit_file(self, isolated_cwd):
        with pytest.raises(FileNotFoundError):
            load_config(str(isolated_cwd / "nope.yaml"))


class TestEnvironment:
    def test_env_overrides_yaml(self, isolated_cwd, monkeypatch):
        path = _write(isolated_cwd / "c.yaml", "thresholds:\n  min_volume: 10\n")
        monkeypatch.setenv("ALERTS_THRESHOLDS_MIN_VOLUME", "60")
        monkeypatch.setenv("ALERTS_LIFECYCLE_ENABLED", "false")
        monkeypatch.setenv("ALERTS_THRESHOLDS_RISK_SCORE", "50.5")
        config = load_config(path)
        assert config.thresholds.min_volume == 60
        assert config.lifecycle.enabled is False
        assert config.thresholds.risk_score == 50.5

    def test_unparseable_number_falls_back(self, monkeypatch):
        monkeypatch.setenv("ALERTS_ENGINE_MAX_ALERTS", "many")
        assert load_config().engine.max_alerts == 32

    def test_dotenv_file(self, isolated_cwd, monkeypatch):
        monkeypatch.delenv("ALERTS_REPORT_PAGE_LIMIT", raising=False)
        _write(isolated_cwd / ".env", "ALERTS_REPORT_PAGE_LIMIT=10\n")
        try:
            assert load_config().report.page_limit == 10
        finally:
            # load_dotenv writes straight into the process environment
            os.environ.pop("ALERTS_REPORT_PAGE_LIMIT", None)

    def test_env_key_mapping(self, monkeypatch):
        monkeypatch.setenv("ALERTS_LIFECYCLE_SLA_HOURS_HIGH", "8")
        assert ConfigLoader()._get_env("lifecycle.sla_hours.high") == "8"


class TestValidation:
    @pytest.mark.parametrize(
        "yaml_text,message",
        [
            ("engine:\n  max_alerts: 0\n", "engine.max_alerts"),
            ("engine:\n  max_workers: 0\n", "engine.max_workers"),
            ("thresholds:\n  min_volume: -1\n", "thresholds.min_volume"),
            ("thresholds:\n  negativity_pct: alto\n", "thresholds.negativity_pct"),
            ("lifecycle:\n  sla_hours:\n    low: 0\n", "lifecycle.sla_hours.low"),
            ("report:\n  default_timeframe: 2h\n", "report.default_timeframe"),
            ("report:\n  page_limit: 500\n", "report.page_limit"),
        ],
    )
    def test_invalid_values(self, isolated_cwd, yaml_text, message):
        path = _write(isolated_cwd / "bad.yaml", yaml_text)
        with pytest.raises(ValueError, match=message):
            load_config(path)

import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Any
from dotenv import load_dotenv


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    debug: bool = False
    enable_console: bool = True
    colorize: bool = True
    service_name: str = "alert-engine"


@dataclass
class ThresholdsConfig:
    """Base alert rule thresholds."""

    min_volume: int = 40
    volume_spike_pct: float = 30.0
    volume_z_score: float = 2.0
    negativity_pct: float = 35.0
    risk_score: float = 45.0
    viral_impact_ratio: float = 1.3
    viral_delta_pct: float = 20.0
    sentiment_shift_pct: float = 10.0
    topic_novelty_pct: float = 60.0
    cross_platform_delta_pct: float = 25.0
    cross_platform_min_platforms: int = 2
    coordination_ratio: float = 18.0
    geo_spread_delta_pct: float = 25.0


@dataclass
class EngineConfig:
    """Alert engine configuration."""

    max_alerts: int = 32
    max_workers: int = 1


@dataclass
class SlaHoursConfig:
    """SLA target in hours per severity."""

    critical: float = 2.0
    high: float = 6.0
    medium: float = 12.0
    low: float = 24.0


@dataclass
class LifecycleConfig:
    """Lifecycle simulator configuration."""

    enabled: bool = True
    seed: str = ""
    sla_hours: SlaHoursConfig = field(default_factory=SlaHoursConfig)


@dataclass
class ReportConfig:
    """Dashboard report configuration."""

    default_timeframe: str = "todo"
    max_related: int = 6
    page_limit: int = 32


@dataclass
class Config:
    """Main configuration container.

    This is the root config object that contains all sub-configurations.
    Similar to Go's Viper config struct.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    thresholds: ThresholdsConfig = field(default_factory=ThresholdsConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    lifecycle: LifecycleConfig = field(default_factory=LifecycleConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


class ConfigLoader:
    """Viper-style configuration loader.

    Loads configuration from:
    1. YAML files (lowest priority)
    2. .env files
    3. Environment variables (highest priority)
    """

    def __init__(self, config_path: Optional[str] = None):
        # Core loader settings actually used by the loader
        self.config_name = "config"
        self.config_paths = [".", "config", "/etc/alert-engine"]
        self.config_file = Path(config_path) if config_path else None
        self.env_prefix = "ALERTS"
        self.auto_env = True
        self._raw_config: Dict[str, Any] = {}

    def read_config(self) -> Config:
        """Read configuration from all sources.

        Returns:
            Config object with all settings

        Raises:
            FileNotFoundError: explicit config_path does not exist
            ValueError: validation failed
        """
        # Step 1: Load YAML config
        self._load_yaml()

        # Step 2: Load .env files
        self._load_env_files()

        # Step 3: Build Config object with env overrides
        config = self._build_config()

        # Step 4: Validate configuration
        self._validate(config)

        return config

    def _find_config_file(self) -> Optional[Path]:
        if self.config_file is not None:
            if not self.config_file.exists():
                raise FileNotFoundError(f"config file not found: {self.config_file}")
            return self.config_file

        for path in self.config_paths:
            for ext in ["yaml", "yml"]:
                file_path = Path(path) / f"{self.config_name}.{ext}"
                if file_path.exists():
                    return file_path
        return None

    def _load_yaml(self) -> None:
        """Load YAML configuration file."""
        config_file = self._find_config_file()
        if not config_file:
            return

        with open(config_file, "r", encoding="utf-8") as f:
            self._raw_config = yaml.safe_load(f) or {}

    def _load_env_files(self) -> None:
        """Load .env files."""
        for env_file in [".env", ".env.local"]:
            for path in self.config_paths:
                env_path = Path(path) / env_file
                if env_path.exists():
                    load_dotenv(env_path, override=True)

    def _get_env(self, key: str, default: Any = None) -> Any:
        """Get value from environment variable.

        Converts nested key to env var:
        - "thresholds.min_volume" -> "ALERTS_THRESHOLDS_MIN_VOLUME"
        """
        if not self.auto_env:
            return default

        env_key = key.replace(".", "_").upper()
        if self.env_prefix:
            env_key = f"{self.env_prefix}_{env_key}"

        return os.getenv(env_key, default)

    def _get_value(self, key: str, default: Any = None) -> Any:
        """Get value with priority: env > yaml > default."""
        # Check environment variable first
        env_value = self._get_env(key)
        if env_value is not None:
            default_type = type(default)
            if default_type == bool:
                return env_value.lower() in ("true", "1", "yes")
            elif default_type == int:
                try:
                    return int(env_value)
                except ValueError:
                    return default
            elif default_type == float:
                try:
                    return float(env_value)
                except ValueError:
                    return default
            else:
                return env_value

        # Check YAML config
        keys = key.split(".")
        value = self._raw_config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

        return value if value is not None else default

    def _build_config(self) -> Config:
        """Build Config object from loaded values."""
        thresholds_defaults = ThresholdsConfig()
        sla_defaults = SlaHoursConfig()
        return Config(
            logging=LoggingConfig(
                level=self._get_value("logging.level", "INFO"),
                debug=self._get_value("logging.debug", False),
                enable_console=self._get_value("logging.enable_console", True),
                colorize=self._get_value("logging.colorize", True),
                service_name=self._get_value("logging.service_name", "alert-engine"),
            ),
            thresholds=ThresholdsConfig(
                **{
                    name: self._get_value(f"thresholds.{name}", default)
                    for name, default in vars(thresholds_defaults).items()
                }
            ),
            engine=EngineConfig(
                max_alerts=self._get_value("engine.max_alerts", 32),
                max_workers=self._get_value("engine.max_workers", 1),
            ),
            lifecycle=LifecycleConfig(
                enabled=self._get_value("lifecycle.enabled", True),
                seed=str(self._get_value("lifecycle.seed", "")),
                sla_hours=SlaHoursConfig(
                    **{
                        name: self._get_value(f"lifecycle.sla_hours.{name}", default)
                        for name, default in vars(sla_defaults).items()
                    }
                ),
            ),
            report=ReportConfig(
                default_timeframe=self._get_value("report.default_timeframe", "todo"),
                max_related=self._get_value("report.max_related", 6),
                page_limit=self._get_value("report.page_limit", 32),
            ),
        )

    def _validate(self, config: Config) -> None:
        """Validate configuration."""
        errors = []

        # Validate thresholds
        for name, value in vars(config.thresholds).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"thresholds.{name} must be a number")
            elif value < 0:
                errors.append(f"thresholds.{name} must be >= 0")

        # Validate engine
        if config.engine.max_alerts < 1:
            errors.append("engine.max_alerts must be >= 1")
        if config.engine.max_workers < 1:
            errors.append("engine.max_workers must be >= 1")

        # Validate lifecycle
        for name, value in vars(config.lifecycle.sla_hours).items():
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(f"lifecycle.sla_hours.{name} must be > 0")

        # Validate report
        if config.report.default_timeframe not in ("24h", "72h", "7d", "1m", "todo"):
            errors.append("report.default_timeframe must be one of 24h, 72h, 7d, 1m, todo")
        if config.report.max_related < 0:
            errors.append("report.max_related must be >= 0")
        if not 1 <= config.report.page_limit <= 200:
            errors.append("report.page_limit must be between 1 and 200")

        if errors:
            raise ValueError(
                f"Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration.

    Args:
        config_path: Explicit YAML file; searched in the default paths when None

    Returns:
        Config object
    """
    return ConfigLoader(config_path).read_config()

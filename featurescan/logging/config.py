"""
Logging configuration for featurescan.

Loads the "logging" section of the YAML config file, applies environment
variable overrides and configures the LoggerFactory.
"""

import os
import re
import sys
from pathlib import Path
from typing import Dict, Any, Optional

import yaml


class LoggingConfig:
    """
    Centralized logging configuration.

    Precedence: overrides > environment > file > defaults

    Example configuration file (config.yml):
        logging:
          enabled: true       # Must be true to enable logging (default: false)
          level: INFO
          format: json        # json or text
          output: file        # stderr, stdout, file
          file_path: /var/log/featurescan/analysis.log
    """

    DEFAULT_CONFIG = {
        "enabled": False,
        "level": "INFO",
        "format": "json",
        "output": "stderr",
        "file_path": None,
    }

    ENV_MAPPINGS = {
        "FEATURESCAN_LOG_LEVEL": "level",
        "FEATURESCAN_LOG_FORMAT": "format",
        "FEATURESCAN_LOG_OUTPUT": "output",
        "FEATURESCAN_LOG_FILE": "file_path",
    }

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from the config file and the environment.

        Args:
            config_path: Path to configuration file

        Returns:
            Configuration dictionary
        """
        config = cls.DEFAULT_CONFIG.copy()

        if config_path and Path(config_path).exists():
            file_config = cls._load_from_file(config_path)
            if isinstance(file_config, dict) and isinstance(file_config.get("logging"), dict):
                config.update(file_config["logging"])

        config = cls._apply_env_overrides(config)
        return cls._substitute_env_vars(config)

    @classmethod
    def _load_from_file(cls, config_path: str) -> Optional[Dict[str, Any]]:
        try:
            with open(config_path, encoding="utf-8") as f:
                return yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            sys.stderr.write(f"Error loading config file {config_path}: {e}\n")
            return None

    @classmethod
    def _apply_env_overrides(cls, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides.

        Environment variables:
            FEATURESCAN_LOG_ENABLED: Enable/disable logging (true, false, yes, no, 1, 0)
            FEATURESCAN_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            FEATURESCAN_LOG_FORMAT: Output format (json, text)
            FEATURESCAN_LOG_OUTPUT: Output destination (stderr, stdout, file)
            FEATURESCAN_LOG_FILE: Log file path
        """
        if "FEATURESCAN_LOG_ENABLED" in os.environ:
            enabled_value = os.environ["FEATURESCAN_LOG_ENABLED"].lower()
            config["enabled"] = enabled_value in ("true", "yes", "1", "on")

        for env_var, config_key in cls.ENV_MAPPINGS.items():
            if env_var in os.environ:
                config[config_key] = os.environ[env_var]

        return config

    @classmethod
    def _substitute_env_vars(cls, config: Any) -> Any:
        """
        Recursively substitute ${VAR_NAME} references in configuration values.

        Unknown variables are left as written.
        """
        if isinstance(config, str):

            def replace_env(match):
                return os.environ.get(match.group(1), match.group(0))

            return re.sub(r"\$\{([^}]+)\}", replace_env, config)

        elif isinstance(config, dict):
            return {k: cls._substitute_env_vars(v) for k, v in config.items()}

        elif isinstance(config, list):
            return [cls._substitute_env_vars(item) for item in config]

        return config

    @classmethod
    def setup_logging(cls, config_path: Optional[str] = None, **overrides):
        """
        Setup logging based on configuration.

        Args:
            config_path: Path to configuration file
            **overrides: Configuration overrides (e.g., level="DEBUG")
        """
        from featurescan.logging.structured_logger import LoggerFactory

        config = cls.load(config_path)
        config.update(overrides)

        if not config.get("enabled", True):
            LoggerFactory.configure(level="CRITICAL", format_style="json", stream=open(os.devnull, "w"))
            return

        output_type = config.get("output", "stderr")
        if output_type == "stdout":
            stream = sys.stdout
        elif output_type == "file" and config.get("file_path"):
            file_path = Path(config["file_path"])
            file_path.parent.mkdir(parents=True, exist_ok=True)
            stream = open(file_path, "a", encoding="utf-8")
        else:
            if output_type == "file":
                sys.stderr.write("Warning: file output selected but no file_path specified, using stderr\n")
            stream = sys.stderr

        LoggerFactory.configure(
            level=config.get("level", "INFO"), format_style=config.get("format", "json"), stream=stream
        )

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> tuple:
        """
        Validate configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = str(config.get("level", "INFO")).upper()
        if level not in valid_levels:
            return False, f"Invalid log level '{level}'. Must be one of: {', '.join(valid_levels)}"

        valid_formats = ["json", "text"]
        format_style = config.get("format", "json")
        if format_style not in valid_formats:
            return False, f"Invalid format '{format_style}'. Must be one of: {', '.join(valid_formats)}"

        valid_outputs = ["stderr", "stdout", "file"]
        output = config.get("output", "stderr")
        if output not in valid_outputs:
            return False, f"Invalid output '{output}'. Must be one of: {', '.join(valid_outputs)}"

        if output == "file" and not config.get("file_path"):
            return False, "file_path required when output is 'file'"

        return True, ""

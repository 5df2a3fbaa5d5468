"""
Configuration management for the what3words client.
"""

import logging
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli

logger = logging.getLogger(__name__)

API_KEY_PLACEHOLDERS = ["", "YOUR_API_KEY_HERE"]


def replaceMatchToEnv(match: re.Match[str]) -> str:
    """Replace ${VAR} placeholder with environment value, keeping it if VAR is unset."""
    key = match.group(1)
    return os.getenv(key, match.group(0))


def substituteEnvVars(value: Any) -> Any:
    """Recursively substitute ${VAR_NAME} placeholders in configuration values.

    Args:
        value: The configuration value to process. Can be a string, dict, list, or other type.

    Returns:
        The processed value; types other than str, dict and list are returned unchanged
    """
    if isinstance(value, str):
        return re.sub(r"\$\{([A-Za-z_][A-Za-z0-9_-]*)\}", replaceMatchToEnv, value)
    elif isinstance(value, dict):
        return {k: substituteEnvVars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substituteEnvVars(item) for item in value]
    return value


def mergeConfigs(baseConfig: Dict[str, Any], newConfig: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge newConfig over baseConfig, dood!"""
    merged = baseConfig.copy()

    for key, value in newConfig.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = mergeConfigs(merged[key], value)
        else:
            merged[key] = value

    return merged


class ConfigManager:
    """Loads what3words client configuration from TOML files.

    The main file is read first, then every .toml file found in configDirs
    (sorted, recursively) is merged over it. The result must contain
    ``[what3words] api-key``, otherwise the process exits.
    """

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        """Initialize ConfigManager with config file path and optional config directories."""
        self.configPath = configPath
        self.configDirs = configDirs or []
        self.config = substituteEnvVars(self._loadConfig())

    def _findTomlFiles(self, directory: str) -> List[Path]:
        """Recursively find all .toml files in a directory, dood!"""
        dirPath = Path(directory)
        if not dirPath.is_dir():
            logger.warning(f"Config directory {directory} does not exist, skipping, dood!")
            return []

        return sorted(path for path in dirPath.rglob("*.toml") if path.is_file())

    def _loadConfig(self) -> Dict[str, Any]:
        """Load configuration from TOML file and optional config directories."""
        configFile = Path(self.configPath)
        hasConfigFile = configFile.exists()
        if not hasConfigFile and not self.configDirs:
            logger.error(f"Configuration file {self.configPath} not found!")
            sys.exit(1)

        try:
            config: Dict[str, Any] = {}
            if hasConfigFile:
                with open(configFile, "rb") as f:
                    config = tomli.load(f)
                logger.info(f"Loaded main config from {self.configPath}")

            for configDir in self.configDirs:
                for tomlFile in self._findTomlFiles(configDir):
                    with open(tomlFile, "rb") as f:
                        config = mergeConfigs(config, tomli.load(f))
                    logger.info(f"Merged config from {tomlFile}")

        except (OSError, tomli.TOMLDecodeError) as e:
            logger.error(f"Failed to load configuration: {e}")
            sys.exit(1)

        if not config.get("what3words", {}).get("api-key"):
            logger.error("what3words api-key not found in configuration!")
            sys.exit(1)

        logger.info("Configuration loaded successfully, dood!")
        return config

    def get(self, key: str, default=None) -> Any:
        """Get configuration value by key."""
        return self.config.get(key, default)

    def getWhat3WordsConfig(self) -> Dict[str, Any]:
        """Get what3words client configuration."""
        return self.get("what3words", {})

    def getLoggingConfig(self) -> Dict[str, Any]:
        """Get logging-specific configuration."""
        return self.get("logging", {})

    def getApiKey(self) -> str:
        """Get what3words API key, exiting if it is still a placeholder."""
        apiKey = self.getWhat3WordsConfig().get("api-key", "")
        if not isinstance(apiKey, str):
            logger.error(f"what3words api-key must be a string, got {type(apiKey).__name__}!")
            sys.exit(1)
        if apiKey in API_KEY_PLACEHOLDERS or re.fullmatch(r"\$\{[^}]*\}", apiKey):
            logger.error("Please set your what3words api-key in config.toml!")
            sys.exit(1)
        return apiKey

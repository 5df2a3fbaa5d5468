"""
Tests for the Configuration Manager.

Covers configuration loading, directory merging, environment substitution
and validation of the what3words section.
"""

import tempfile
from pathlib import Path

import pytest

from internal.config.manager import ConfigManager, mergeConfigs, substituteEnvVars

# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def tempDir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sampleConfigToml():
    """Provide sample valid TOML configuration."""
    return """
[what3words]
api-key = "test_api_key"
language = "en"
request-timeout = 5

[logging]
level = "INFO"
"""


@pytest.fixture
def overrideToml():
    """Provide override configuration TOML."""
    return """
[what3words]
language = "de"
format = "geojson"

[logging]
level = "DEBUG"
"""


def createConfigFile(directory: Path, filename: str, content: str) -> Path:
    """Create a TOML config file in the specified directory."""
    filePath = directory / filename
    filePath.parent.mkdir(parents=True, exist_ok=True)
    filePath.write_text(content)
    return filePath


# ============================================================================
# Loading Tests
# ============================================================================


class TestConfigManagerLoading:
    """Test ConfigManager loading and validation."""

    def testLoadValidConfig(self, tempDir, sampleConfigToml):
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)

        manager = ConfigManager(str(configPath))

        assert manager.configPath == str(configPath)
        assert manager.getApiKey() == "test_api_key"
        assert manager.getWhat3WordsConfig()["request-timeout"] == 5
        assert manager.getLoggingConfig() == {"level": "INFO"}

    def testMergeConfigDirs(self, tempDir, sampleConfigToml, overrideToml):
        """Test files from config dirs override the main file, dood!"""
        configPath = createConfigFile(tempDir, "config.toml", sampleConfigToml)
        createConfigFile(tempDir, "conf.d/nested/override.toml", overrideToml)

        manager = ConfigManager(str(configPath), configDirs=[str(tempDir / "conf.d")])

        w3wConfig = manager.getWhat3WordsConfig()
        assert w3wConfig["api-key"] == "test_api_key"
        assert w3wConfig["language"] == "de"
        assert w3wConfig["format"] == "geojson"
        assert manager.getLoggingConfig()["level"] == "DEBUG"

    def testConfigDirsWithoutMainFile(self, tempDir, sampleConfigToml):
        createConfigFile(tempDir, "conf.d/base.toml", sampleConfigToml)

        manager = ConfigManager(str(tempDir / "missing.toml"), configDirs=[str(tempDir / "conf.d")])

        assert manager.getApiKey() == "test_api_key"

    def testMissingConfigFileExits(self, tempDir):
        with pytest.raises(SystemExit):
            ConfigManager(str(tempDir / "missing.toml"))

    def testInvalidTomlExits(self, tempDir):
        configPath = createConfigFile(tempDir, "config.toml", "[what3words\napi-key = 1")

        with pytest.raises(SystemExit):
            ConfigManager(str(configPath))

    def testMissingApiKeyExits(self, tempDir):
        """Test configuration without api-key is rejected, dood!"""
        configPath = createConfigFile(tempDir, "config.toml", '[what3words]\nlanguage = "en"\n')

        with pytest.raises(SystemExit):
            ConfigManager(str(configPath))

    def testPlaceholderApiKeyExits(self, tempDir):
        configPath = createConfigFile(tempDir, "config.toml", '[what3words]\napi-key = "YOUR_API_KEY_HERE"\n')
        manager = ConfigManager(str(configPath))

        with pytest.raises(SystemExit):
            manager.getApiKey()

    def testNonStringApiKeyExits(self, tempDir):
        """Test a numeric api-key is rejected instead of crashing, dood!"""
        configPath = createConfigFile(tempDir, "config.toml", "[what3words]\napi-key = 123\n")
        manager = ConfigManager(str(configPath))

        with pytest.raises(SystemExit):
            manager.getApiKey()

    def testApiKeyFromEnvironment(self, tempDir, monkeypatch):
        monkeypatch.setenv("W3W_TEST_API_KEY", "env_key")
        configPath = createConfigFile(tempDir, "config.toml", '[what3words]\napi-key = "${W3W_TEST_API_KEY}"\n')

        manager = ConfigManager(str(configPath))

        assert manager.getApiKey() == "env_key"

    def testUnsetEnvironmentPlaceholderExits(self, tempDir, monkeypatch):
        monkeypatch.delenv("W3W_UNSET_API_KEY", raising=False)
        configPath = createConfigFile(tempDir, "config.toml", '[what3words]\napi-key = "${W3W_UNSET_API_KEY}"\n')
        manager = ConfigManager(str(configPath))

        with pytest.raises(SystemExit):
            manager.getApiKey()


# ============================================================================
# Helper Tests
# ============================================================================


def testSubstituteEnvVarsNested(monkeypatch):
    monkeypatch.setenv("W3W_HOST", "http://localhost:4000/v3")

    result = substituteEnvVars({"hosts": ["${W3W_HOST}"], "timeout": 10})

    assert result == {"hosts": ["http://localhost:4000/v3"], "timeout": 10}


def testMergeConfigsRecursive():
    base = {"what3words": {"api-key": "a", "language": "en"}, "logging": {"level": "INFO"}}
    override = {"what3words": {"language": "fr"}}

    merged = mergeConfigs(base, override)

    assert merged == {"what3words": {"api-key": "a", "language": "fr"}, "logging": {"level": "INFO"}}
    assert base["what3words"]["language"] == "en"

"""Tests for the configuration module."""

import pytest

from powervs_sdk.config import (
    ServiceConfig,
    config_from_properties,
    find_credentials_file,
    get_service_properties,
    load_config,
)
from powervs_sdk.exceptions import ConfigurationError, EnvironmentVariableError


class TestServiceConfig:
    """Tests for ServiceConfig model."""

    def test_defaults(self):
        """Test default values."""
        config = ServiceConfig()
        assert config.url is None
        assert config.disable_ssl is False
        assert config.enable_retries is False
        assert config.max_retries == 4
        assert config.retry_interval == 30.0

    def test_url_trailing_slash_stripped(self):
        """Test URL normalisation."""
        config = ServiceConfig(url="https://us-east.power-iaas.cloud.ibm.com/")
        assert config.url == "https://us-east.power-iaas.cloud.ibm.com"

    def test_empty_url_is_none(self):
        """Test an empty URL means unset."""
        assert ServiceConfig(url="").url is None

    def test_invalid_url(self):
        """Test a URL without scheme is rejected."""
        with pytest.raises(ValueError):
            ServiceConfig(url="power-iaas.cloud.ibm.com")

    def test_max_retries_bounds(self):
        """Test max_retries limits."""
        with pytest.raises(ValueError):
            ServiceConfig(max_retries=11)
        with pytest.raises(ValueError):
            ServiceConfig(max_retries=-1)


class TestConfigFromProperties:
    """Tests for config_from_properties."""

    def test_values_parsed(self):
        config = config_from_properties({
            "URL": "https://example.com",
            "DISABLE_SSL": "True",
            "ENABLE_RETRIES": "true",
            "MAX_RETRIES": "2",
            "RETRY_INTERVAL": "5",
        })
        assert config.url == "https://example.com"
        assert config.disable_ssl is True
        assert config.enable_retries is True
        assert config.max_retries == 2
        assert config.retry_interval == 5.0

    @pytest.mark.parametrize(
        "props",
        [{"MAX_RETRIES": "many"}, {"RETRY_INTERVAL": "0"}, {"URL": "ftp://example.com"}],
    )
    def test_invalid_values(self, props):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            config_from_properties(props)


class TestServiceProperties:
    """Tests for credentials file and environment lookup."""

    def test_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("POWERVS_URL", "https://env.example.com")
        monkeypatch.setenv("POWERVS_APIKEY", "env-key")
        monkeypatch.setenv("OTHER_URL", "https://other.example.com")

        props = get_service_properties("powervs")
        assert props == {"URL": "https://env.example.com", "APIKEY": "env-key"}

    def test_service_name_normalised(self, clean_env, monkeypatch):
        monkeypatch.setenv("MY_POWERVS_URL", "https://mine.example.com")
        assert get_service_properties("my-powervs") == {"URL": "https://mine.example.com"}

    def test_explicit_credentials_file(self, clean_env, monkeypatch):
        creds = clean_env / "creds.env"
        creds.write_text("POWERVS_URL=https://file.example.com\nPOWERVS_AUTH_TYPE=iam\nPOWERVS_APIKEY=file-key\n")
        monkeypatch.setenv("IBM_CREDENTIALS_FILE", str(creds))
        monkeypatch.setenv("POWERVS_APIKEY", "env-key")

        props = get_service_properties("powervs")
        assert props["URL"] == "https://file.example.com"
        assert props["AUTH_TYPE"] == "iam"
        # Environment overrides the file
        assert props["APIKEY"] == "env-key"

    def test_default_file_in_working_directory(self, clean_env):
        (clean_env / "ibm-credentials.env").write_text("POWERVS_URL=https://cwd.example.com\n")
        assert find_credentials_file() == clean_env / "ibm-credentials.env"
        assert get_service_properties("powervs") == {"URL": "https://cwd.example.com"}

    def test_default_file_in_home(self, clean_env):
        (clean_env / "home" / "ibm-credentials.env").write_text("POWERVS_URL=https://home.example.com\n")
        assert get_service_properties("powervs") == {"URL": "https://home.example.com"}

    def test_no_file(self, clean_env):
        assert find_credentials_file() is None
        assert get_service_properties("powervs") == {}

    def test_missing_explicit_file(self, clean_env, monkeypatch):
        monkeypatch.setenv("IBM_CREDENTIALS_FILE", str(clean_env / "nope.env"))
        with pytest.raises(EnvironmentVariableError) as exc_info:
            get_service_properties("powervs")
        assert exc_info.value.variable == "IBM_CREDENTIALS_FILE"


class TestLoadConfig:
    """Tests for load_config."""

    def test_load(self, env_with_credentials):
        config = load_config("powervs")
        assert config.url == "https://us-south.power-iaas.cloud.ibm.com"
        assert config.enable_retries is True
        assert config.max_retries == 2

    def test_invalid(self, clean_env, monkeypatch):
        monkeypatch.setenv("POWERVS_MAX_RETRIES", "50")
        with pytest.raises(ConfigurationError):
            load_config("powervs")

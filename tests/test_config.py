"""Tests for settings, the user .env writer and logging setup."""

import logging
import sys

import pytest
from pydantic import ValidationError

from core.config import (
    DEFAULT_API_ENDPOINT,
    AppSettings,
    get_user_env_file,
    load_settings,
    write_user_env_vars,
)
from core.errors import ConfigurationError, HexbotError
from core.logging_config import configure_logging

linux_only = pytest.mark.skipif(
    sys.platform.startswith('win') or sys.platform == 'darwin',
    reason='XDG_CONFIG_HOME is only honoured on Linux',
)


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self):
        settings = AppSettings()
        assert settings.api_endpoint == DEFAULT_API_ENDPOINT
        assert settings.http_timeout_seconds == 20.0
        assert settings.log_level == 'WARNING'

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv('HEXBOT_API_ENDPOINT', 'https://hexbot.test/hexbot')
        monkeypatch.setenv('HEXBOT_HTTP_TIMEOUT_SECONDS', '3.5')
        monkeypatch.setenv('HEXBOT_LOG_LEVEL', 'debug')
        settings = AppSettings()
        assert settings.api_endpoint == 'https://hexbot.test/hexbot'
        assert settings.http_timeout_seconds == 3.5
        assert settings.log_level == 'DEBUG'

    def test_dotenv_in_working_directory(self, isolated_env):
        (isolated_env / '.env').write_text('HEXBOT_USER_AGENT=from-dotenv\n', encoding='utf-8')
        assert AppSettings().user_agent == 'from-dotenv'

    @pytest.mark.parametrize('timeout', [0, -1])
    def test_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ValidationError):
            AppSettings(http_timeout_seconds=timeout)

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            AppSettings(log_level='LOUD')

    def test_load_settings_wraps_validation_error(self, monkeypatch):
        monkeypatch.setenv('HEXBOT_LOG_LEVEL', 'LOUD')
        with pytest.raises(ConfigurationError) as excinfo:
            load_settings()
        assert isinstance(excinfo.value, HexbotError)
        assert isinstance(excinfo.value.cause, ValidationError)
        assert 'HEXBOT_LOG_LEVEL' in str(excinfo.value)

    def test_load_settings_reads_dotenv(self, isolated_env):
        (isolated_env / '.env').write_text('HEXBOT_HTTP_TIMEOUT_SECONDS=0\n', encoding='utf-8')
        with pytest.raises(ConfigurationError):
            load_settings()


@linux_only
class TestUserEnvFile:
    """Tests for the per-user .env file."""

    def test_location_follows_xdg(self, isolated_env):
        assert get_user_env_file() == isolated_env / 'config' / 'hexbot-client' / '.env'

    def test_write_and_merge(self):
        path = write_user_env_vars({'HEXBOT_API_ENDPOINT': 'https://a.test/hexbot'})
        write_user_env_vars({'HEXBOT_HTTP_TIMEOUT_SECONDS': '5'})
        lines = path.read_text(encoding='utf-8').splitlines()
        assert lines[0].startswith('#')
        assert 'HEXBOT_API_ENDPOINT=https://a.test/hexbot' in lines
        assert 'HEXBOT_HTTP_TIMEOUT_SECONDS=5' in lines


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_idempotent(self):
        configure_logging('INFO')
        configure_logging('DEBUG')
        root = logging.getLogger()
        named = [h for h in root.handlers if h.get_name() == 'hexbot-rich']
        assert len(named) == 1
        assert root.level == logging.DEBUG

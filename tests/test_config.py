"""
Unit tests for factory configuration.

Tests dotted-path imports, the naming helpers and FactoryConfig
resolution from the environment and from a pytest config.
"""

from typing import Any, Dict, Optional

import pytest

from http_factory_test.config import (
    FACTORY_KINDS,
    FactoryConfig,
    env_name,
    import_string,
    ini_name,
    option_name,
)
from http_factory_test.exceptions import ConfigurationError
from http_factory_test.reference import StreamFactory, UriFactory


class FakePytestConfig:
    """Minimal stand-in for pytest's Config object."""

    def __init__(self, options: Optional[Dict[str, str]] = None, ini: Optional[Dict[str, str]] = None) -> None:
        self.options = options or {}
        self.ini = ini or {}

    def getoption(self, name: str, default: Any = None) -> Any:
        return self.options.get(name, default)

    def getini(self, name: str) -> str:
        return self.ini.get(name, "")


class TestNames:
    """Test the option naming helpers."""

    def test_names(self) -> None:
        """Test the three spellings of a factory setting."""
        assert ini_name("server_request") == "server_request_factory"
        assert option_name("server_request") == "--server-request-factory"
        assert env_name("server_request") == "HTTP_FACTORY_SERVER_REQUEST_FACTORY"

    def test_every_kind_has_distinct_names(self) -> None:
        """Test that no two kinds share an option."""
        assert len({option_name(kind) for kind in FACTORY_KINDS}) == len(FACTORY_KINDS)


class TestImportString:
    """Test resolving dotted paths."""

    @pytest.mark.parametrize(
        "path",
        [
            "http_factory_test.reference:StreamFactory",
            "http_factory_test.reference.StreamFactory",
            "http_factory_test.reference.factories.StreamFactory",
        ],
    )
    def test_import(self, path: str) -> None:
        """Test both separator styles."""
        assert import_string(path) is StreamFactory

    def test_nested_attribute(self) -> None:
        """Test reaching an attribute of an attribute."""
        assert import_string("http_factory_test.reference:Uri.parse").__name__ == "parse"

    def test_missing_module(self) -> None:
        """Test that import failures are wrapped."""
        with pytest.raises(ConfigurationError, match="cannot import module") as excinfo:
            import_string("http_factory_test.missing:Factory")
        assert isinstance(excinfo.value.cause, ImportError)
        assert excinfo.value.__cause__ is excinfo.value.cause

    def test_missing_attribute(self) -> None:
        """Test that a missing attribute is reported."""
        with pytest.raises(ConfigurationError, match="has no attribute"):
            import_string("http_factory_test.reference:MissingFactory")

    @pytest.mark.parametrize("path", ["StreamFactory", ":StreamFactory", "http_factory_test:"])
    def test_not_a_dotted_path(self, path: str) -> None:
        """Test that incomplete paths are rejected."""
        with pytest.raises(ConfigurationError, match="is not a dotted path"):
            import_string(path)


class TestFactoryConfig:
    """Test FactoryConfig resolution and factory creation."""

    def test_from_env(self) -> None:
        """Test reading HTTP_FACTORY_* variables."""
        config = FactoryConfig.from_env({
            "HTTP_FACTORY_STREAM_FACTORY": "http_factory_test.reference:StreamFactory",
            "HTTP_FACTORY_URI_FACTORY": "",
            "UNRELATED": "value",
        })

        assert config.paths == {"stream": "http_factory_test.reference:StreamFactory"}
        assert config.is_configured("stream") is True
        assert config.is_configured("uri") is False

    def test_from_process_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that os.environ is the default source."""
        monkeypatch.setenv("HTTP_FACTORY_URI_FACTORY", "http_factory_test.reference:UriFactory")

        config = FactoryConfig.from_env()

        assert config.factory_path("uri") == "http_factory_test.reference:UriFactory"

    def test_from_pytest_config_precedence(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test command line over ini over environment."""
        monkeypatch.setenv("HTTP_FACTORY_STREAM_FACTORY", "env:Stream")
        monkeypatch.setenv("HTTP_FACTORY_URI_FACTORY", "env:Uri")
        monkeypatch.setenv("HTTP_FACTORY_REQUEST_FACTORY", "env:Request")
        pytest_config = FakePytestConfig(
            options={"stream_factory": "cli:Stream"},
            ini={"stream_factory": "ini:Stream", "uri_factory": "ini:Uri"},
        )

        config = FactoryConfig.from_pytest_config(pytest_config)

        assert config.factory_path("stream") == "cli:Stream"
        assert config.factory_path("uri") == "ini:Uri"
        assert config.factory_path("request") == "env:Request"

    def test_unknown_kind(self) -> None:
        """Test that only known factory kinds are accepted."""
        with pytest.raises(ConfigurationError, match="unknown factory kind 'socket'"):
            FactoryConfig(paths={"socket": "module:Factory"})

        with pytest.raises(ConfigurationError, match="unknown factory kind"):
            FactoryConfig().factory_path("socket")

    def test_not_configured(self) -> None:
        """Test that the error names every way to configure the factory."""
        with pytest.raises(ConfigurationError) as excinfo:
            FactoryConfig().factory_path("stream")

        message = str(excinfo.value)
        assert "--stream-factory" in message
        assert "stream_factory" in message
        assert "HTTP_FACTORY_STREAM_FACTORY" in message

    def test_create_factory_instantiates_classes(self) -> None:
        """Test that a class path gives a fresh instance."""
        config = FactoryConfig(paths={"stream": "http_factory_test.reference:StreamFactory"})

        first = config.create_factory("stream")
        second = config.create_factory("stream")

        assert isinstance(first, StreamFactory)
        assert first is not second

    def test_create_factory_returns_instances_as_is(self) -> None:
        """Test that a path to an object is used directly."""
        config = FactoryConfig(paths={"uri": f"{__name__}:URI_FACTORY"})

        assert config.create_factory("uri") is URI_FACTORY

    def test_create_factory_requires_no_arguments(self) -> None:
        """Test that classes needing constructor arguments are reported."""
        config = FactoryConfig(paths={"stream": "http_factory_test.reference:Stream"})

        with pytest.raises(ConfigurationError, match="cannot be instantiated without arguments"):
            config.create_factory("stream")


URI_FACTORY = UriFactory()

"""
Factory configuration for the conformance suites.

A factory under test is named by a dotted path, ``package.module:Class``
or ``package.module.Class``. Paths are collected from the pytest command
line, then the pytest ini file, then ``HTTP_FACTORY_*`` environment
variables, and the first one found wins.
"""

import importlib
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

FACTORY_KINDS = (
    "stream",
    "server_request",
    "request",
    "response",
    "uri",
    "uploaded_file",
)

ENV_PREFIX = "HTTP_FACTORY_"


def ini_name(kind: str) -> str:
    """Name of the ini option for ``kind``, e.g. ``stream_factory``."""
    return f"{kind}_factory"


def option_name(kind: str) -> str:
    """Command-line flag for ``kind``, e.g. ``--stream-factory``."""
    return "--" + ini_name(kind).replace("_", "-")


def env_name(kind: str) -> str:
    """Environment variable for ``kind``, e.g. ``HTTP_FACTORY_STREAM_FACTORY``."""
    return ENV_PREFIX + ini_name(kind).upper()


def _check_kind(kind: str) -> None:
    if kind not in FACTORY_KINDS:
        raise ConfigurationError(
            f"unknown factory kind {kind!r}, expected one of {', '.join(FACTORY_KINDS)}"
        )


def import_string(path: str) -> Any:
    """
    Import the object named by ``path``.

    Args:
        path: ``module:attr`` or ``module.attr``; ``attr`` may itself be
            dotted to reach nested attributes

    Returns:
        The imported object

    Raises:
        ConfigurationError: If the module or attribute cannot be found
    """
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ConfigurationError(f"{path!r} is not a dotted path to an object")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"cannot import module {module_name!r}", cause=exc) from exc

    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise ConfigurationError(
                f"module {module_name!r} has no attribute {attr!r}", cause=exc
            ) from exc
    return obj


@dataclass(frozen=True)
class FactoryConfig:
    """
    Resolved dotted paths of the factories under test, keyed by kind.
    """

    paths: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for kind in self.paths:
            _check_kind(kind)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FactoryConfig":
        """Create a FactoryConfig from ``HTTP_FACTORY_*`` variables."""
        if environ is None:
            environ = os.environ

        paths = {}
        for kind in FACTORY_KINDS:
            value = environ.get(env_name(kind))
            if value:
                paths[kind] = value
        return cls(paths=paths)

    @classmethod
    def from_pytest_config(cls, config: Any) -> "FactoryConfig":
        """
        Create a FactoryConfig from a pytest ``Config``.

        Command-line options take precedence over ini options, which
        take precedence over the environment.
        """
        paths = dict(cls.from_env().paths)
        for kind in FACTORY_KINDS:
            value = config.getoption(ini_name(kind), default=None) or config.getini(ini_name(kind))
            if value:
                paths[kind] = value
        return cls(paths=paths)

    def is_configured(self, kind: str) -> bool:
        _check_kind(kind)
        return kind in self.paths

    def factory_path(self, kind: str) -> str:
        """
        Get the dotted path configured for ``kind``.

        Raises:
            ConfigurationError: If nothing is configured for ``kind``
        """
        _check_kind(kind)
        try:
            return self.paths[kind]
        except KeyError:
            raise ConfigurationError(
                f"no {kind} factory configured: use {option_name(kind)}, "
                f"the {ini_name(kind)} ini option or {env_name(kind)}"
            ) from None

    def create_factory(self, kind: str) -> Any:
        """
        Import and build the factory configured for ``kind``.

        Classes are instantiated without arguments; any other object
        (an instance or a module) is returned as-is.
        """
        path = self.factory_path(kind)
        factory = import_string(path)
        if isinstance(factory, type):
            try:
                factory = factory()
            except TypeError as exc:
                raise ConfigurationError(
                    f"{path!r} cannot be instantiated without arguments", cause=exc
                ) from exc
        logger.debug("Using %s factory %r from %s", kind, factory, path)
        return factory

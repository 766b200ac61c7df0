"""
Pytest plugin wiring the factory configuration into the suites.

Registered through the ``pytest11`` entry point, so installing the
package is enough to get the ``--*-factory`` options and the
``factory_config`` fixture.
"""

from typing import Any, List

import pytest

pytest.register_assert_rewrite("http_factory_test.suites")

from .config import FACTORY_KINDS, FactoryConfig, env_name, ini_name, option_name


def pytest_addoption(parser: Any) -> None:
    group = parser.getgroup("http-factory", "HTTP message factory conformance")
    for kind in FACTORY_KINDS:
        label = kind.replace("_", " ")
        group.addoption(
            option_name(kind),
            dest=ini_name(kind),
            default=None,
            metavar="PATH",
            help=f"dotted path of the {label} factory under test (env: {env_name(kind)})",
        )
        parser.addini(ini_name(kind), f"dotted path of the {label} factory under test")


def pytest_report_header(config: Any) -> List[str]:
    factory_config = FactoryConfig.from_pytest_config(config)
    return [
        f"http-factory: {kind} = {path}"
        for kind, path in sorted(factory_config.paths.items())
    ]


@pytest.fixture(scope="session")
def factory_config(pytestconfig: Any) -> FactoryConfig:
    """Factories configured for this session."""
    return FactoryConfig.from_pytest_config(pytestconfig)

"""
Common base for the conformance suites.
"""

from typing import Any

import pytest

from ..config import FactoryConfig


class FactoryTestCase:
    """
    Base class for all factory conformance suites.

    Before each test the ``factory`` attribute is filled in from
    ``create_factory()``. By default that builds the factory configured
    for ``kind`` through the pytest plugin. Subclasses may override the
    hook to build their factory directly.
    """

    kind = ""

    config: FactoryConfig
    factory: Any

    @pytest.fixture(autouse=True)
    def _setup_factory(self, factory_config: FactoryConfig) -> None:
        self.config = factory_config
        self.factory = self.create_factory()

    def create_factory(self) -> Any:
        return self.config.create_factory(self.kind)

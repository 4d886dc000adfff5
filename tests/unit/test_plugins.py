"""
Unit tests for entry-point algorithm discovery.

Entry points are replaced with MagicMock doubles, so no package metadata is
needed.
"""

from unittest.mock import MagicMock, patch

import pytest

from contentdigest.core.bootstrap import bootstrap
from contentdigest.core.container import get_container
from contentdigest.core.settings import DigestSettings
from contentdigest.hashing import plugins
from contentdigest.hashing.plugins import ENTRY_POINT_GROUP, discover_algorithm_plugins
from contentdigest.hashing.registry import (
    AlgorithmRegistry,
    get_registry,
    install_default_registry,
    register_algorithm,
)
from contentdigest.hashing.strategies import SHA256Strategy


def _entry_point(name, target=None, error=None):
    ep = MagicMock()
    ep.name = name
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = target
    return ep


class TestDiscovery:
    @pytest.fixture
    def empty_registry(self):
        return AlgorithmRegistry(register_defaults=False)

    def test_strategy_class(self, empty_registry):
        eps = [_entry_point("sha256-alias", SHA256Strategy)]
        with patch.object(plugins, "entry_points", return_value=eps) as mock_eps:
            loaded = discover_algorithm_plugins(empty_registry)

        mock_eps.assert_called_once_with(group=ENTRY_POINT_GROUP)
        assert loaded == ["sha256-alias"]
        assert empty_registry.size("sha256-alias") == 32

    def test_strategy_instance(self, empty_registry, fixed_strategy):
        eps = [_entry_point("short", fixed_strategy(size=4))]
        with patch.object(plugins, "entry_points", return_value=eps):
            discover_algorithm_plugins(empty_registry)
        assert empty_registry.size("short") == 4

    def test_callable_receives_registry(self, empty_registry, fixed_strategy):
        def setup(registry):
            registry.register("from-callable", fixed_strategy(size=8))

        eps = [_entry_point("ignored-name", setup)]
        with patch.object(plugins, "entry_points", return_value=eps):
            discover_algorithm_plugins(empty_registry)
        assert "from-callable" in empty_registry

    def test_broken_plugins_are_skipped(self, empty_registry, fixed_strategy):
        eps = [
            _entry_point("broken", error=ImportError("missing dependency")),
            _entry_point("Bad_Name", fixed_strategy()),
            _entry_point("not-a-strategy", 42),
            _entry_point("good", fixed_strategy()),
        ]
        with patch.object(plugins, "entry_points", return_value=eps):
            loaded = discover_algorithm_plugins(empty_registry)

        assert loaded == ["good"]
        assert empty_registry.names() == ["good"]

    def test_failures_are_logged(self, empty_registry):
        logger = MagicMock()
        eps = [_entry_point("broken", error=ImportError("boom"))]
        with (
            patch.object(plugins, "entry_points", return_value=eps),
            patch.object(plugins, "get_logger", return_value=logger),
        ):
            discover_algorithm_plugins(empty_registry)

        logger.debug.assert_called_once()
        assert "broken" in logger.debug.call_args.args

    def test_plugins_cannot_replace_builtins(self, fixed_strategy):
        registry = AlgorithmRegistry()
        eps = [_entry_point("sha256", fixed_strategy(size=4))]
        with patch.object(plugins, "entry_points", return_value=eps):
            discover_algorithm_plugins(registry)
        assert registry.size("sha256") == 32


class TestDefaultRegistry:
    def test_loads_plugins(self, fixed_strategy):
        eps = [_entry_point("extra", fixed_strategy())]
        with patch.object(plugins, "entry_points", return_value=eps):
            registry = get_registry()
        assert "extra" in registry
        assert "sha256" in registry

    def test_plugins_disabled(self, fixed_strategy):
        eps = [_entry_point("extra", fixed_strategy())]
        with patch.object(plugins, "entry_points", return_value=eps) as mock_eps:
            registry = install_default_registry(get_container(), load_plugins=False)
        mock_eps.assert_not_called()
        assert "extra" not in registry

    def test_install_keeps_existing_registry(self):
        container = get_container()
        first = install_default_registry(container, load_plugins=False)
        assert install_default_registry(container) is first
        assert get_registry() is first

    def test_provider_registering_while_loading_reaches_shared_registry(self, fixed_strategy):
        def load_provider_module():
            register_algorithm("k12", fixed_strategy(size=16))
            return lambda registry: None

        ep = MagicMock()
        ep.name = "k12-provider"
        ep.load.side_effect = load_provider_module

        with patch.object(plugins, "entry_points", return_value=[ep]):
            registry = get_registry()

        ep.load.assert_called_once()
        assert registry is get_registry()
        assert "k12" in registry.names()
        assert registry.size("k12") == 16

    def test_provider_registering_during_bootstrap(self, fixed_strategy):
        def load_provider_module():
            register_algorithm("k12", fixed_strategy(size=16))
            return lambda registry: None

        ep = MagicMock()
        ep.name = "k12-provider"
        ep.load.side_effect = load_provider_module

        with patch.object(plugins, "entry_points", return_value=[ep]):
            bootstrap(DigestSettings())

        ep.load.assert_called_once()
        assert get_registry().available("k12")

"""
Test the token source provider registry (discovery, lookup, registration).
"""
import pytest

from vaultclient.app.config import Settings
from vaultclient.app.services.provider_registry import (
    AbstractProviderRegistry,
    TokenSourceRegistry,
    register_provider,
    )
from vaultclient.app.services.token_source import TokenSourceProvider
from vaultclient.app.services.token_source_providers.static import StaticTokenSource


class ScratchRegistry(AbstractProviderRegistry):
    """Registry with no provider folder, isolated from TokenSourceRegistry."""

    @classmethod
    def _get_provider_folder(cls) -> str:
        return "no_such_providers"


def test_static_provider_is_discovered():
    """Test auto-discovery registers the static provider."""
    providers = TokenSourceRegistry.list_providers()
    assert {"code": "static", "name": "Static Token Source"} in providers
    assert TokenSourceRegistry.get_provider("static") is StaticTokenSource


def test_get_provider_instance_forwards_config():
    """Test constructor kwargs reach the provider."""
    config = Settings(_env_file=None).network_config().model_copy(update={"reward_rate_bps": 750})
    instance = TokenSourceRegistry.get_provider_instance("static", config=config)

    assert isinstance(instance, StaticTokenSource)
    assert isinstance(instance, TokenSourceProvider)
    assert instance.config.reward_rate_bps == 750


def test_unknown_provider_returns_none():
    """Test lookups of unregistered codes give None."""
    assert TokenSourceRegistry.get_provider("horizon") is None
    assert TokenSourceRegistry.get_provider_instance("horizon") is None


def test_registries_do_not_share_providers():
    """Test each registry subclass keeps its own provider table."""
    assert "static" not in {p["code"] for p in ScratchRegistry.list_providers()}
    assert ScratchRegistry.get_provider("static") is None


def test_register_provider_decorator():
    """Test the decorator registers a class under its provider_code."""

    @register_provider(ScratchRegistry)
    class ScratchSource:
        provider_code = "scratch"
        provider_name = "Scratch Source"

    assert ScratchRegistry.get_provider("scratch") is ScratchSource
    assert {"code": "scratch", "name": "Scratch Source"} in ScratchRegistry.list_providers()


def test_register_provider_class_attribute_with_required_args():
    """Test a class-attribute code registers without instantiating the provider."""

    @register_provider(ScratchRegistry)
    class EndpointSource:
        provider_code = "endpoint"

        def __init__(self, rpc_url):
            self.rpc_url = rpc_url

    assert ScratchRegistry.get_provider("endpoint") is EndpointSource
    assert ScratchRegistry.get_provider_instance("endpoint", rpc_url="http://rpc").rpc_url == "http://rpc"


def test_register_provider_property_code_needs_default_constructor():
    """Test a property-based code on a provider that cannot be built without arguments is rejected."""
    with pytest.raises(ValueError):
        @register_provider(ScratchRegistry)
        class NeedsArgsSource:
            def __init__(self, rpc_url):
                self.rpc_url = rpc_url

            @property
            def provider_code(self):
                return "needs-args"


def test_register_provider_requires_code():
    """Test a provider without a string provider_code is rejected."""
    with pytest.raises(ValueError):
        @register_provider(ScratchRegistry)
        class NoCodeSource:
            provider_code = None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

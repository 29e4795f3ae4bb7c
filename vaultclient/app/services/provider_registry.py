from __future__ import annotations

import importlib
from pathlib import Path
from typing import Type, Dict, List

from vaultclient.app.logging_config import get_logger

logger = get_logger(__name__)


class AbstractProviderRegistry:
    """Abstract base class for provider registries.

    Each subclass automatically gets its own _providers dictionary.
    """

    def __init_subclass__(cls, **kwargs):
        """Ensure each subclass has its own _providers dict and discovery tracking."""
        super().__init_subclass__(**kwargs)
        cls._providers = {}
        cls._discovery_done = False

    @classmethod
    def register(cls, provider_class: Type) -> None:
        """Register a provider class.

        The provider_class must expose a `provider_code` attribute, either as a
        property (read from a no-argument instance) or as a plain class
        attribute (read directly, for providers whose constructor needs arguments).
        """
        attr = cls._get_provider_code_attr()
        code = getattr(provider_class, attr, None)
        if isinstance(code, property):
            try:
                code = getattr(provider_class(), attr, None)
            except Exception as e:
                raise ValueError(f"Cannot read {attr} of {provider_class.__name__}: {e}") from e

        if not code or not isinstance(code, str):
            raise ValueError("Provider class must define a provider_code attribute")
        cls._providers[code] = provider_class
        logger.debug("Provider registered", registry=cls.__name__, provider_code=code)

    @classmethod
    def get_provider(cls, code: str):
        """Get provider class by code. Triggers auto-discovery if not done yet."""
        cls.auto_discover()
        return cls._providers.get(code)

    @classmethod
    def get_provider_instance(cls, code: str, **kwargs):
        """Return an instantiated provider object for given provider code.

        kwargs (e.g. config=NetworkConfig) are forwarded to the provider constructor.
        Returns None if provider not found.
        """
        prov_cls = cls.get_provider(code)
        if not prov_cls:
            return None
        return prov_cls(**kwargs)

    @classmethod
    def list_providers(cls) -> List[Dict[str, str]]:
        """
        List all registered providers with their metadata.
        Triggers auto-discovery if not done yet.
        Returns:
            List of dicts with 'code' and 'name' keys
        """
        providers = []
        cls.auto_discover()
        for code, provider_class in cls._providers.items():
            try:
                instance = provider_class()
                name = getattr(instance, 'provider_name', None) or code
            except Exception:
                name = code
            providers.append({
                'code': code,
                'name': name
                })
        return providers

    @classmethod
    def auto_discover(cls) -> None:
        """Import all modules in the provider folder to trigger registration.

        Modules are imported by their package name so that a provider imported
        elsewhere (e.g. by a test) is not executed, and registered, twice.
        """
        if cls._discovery_done:
            return
        folder = cls._get_provider_folder()
        target_dir = Path(__file__).parent / folder

        if not target_dir.exists():
            cls._discovery_done = True
            return

        for py in sorted(target_dir.glob('*.py')):
            if py.name == '__init__.py' or not py.is_file():
                continue
            module_name = f"vaultclient.app.services.{folder}.{py.stem}"
            try:
                importlib.import_module(module_name)
            except Exception as e:
                # Log error but don't stop discovery on single-module errors
                logger.error("Error importing provider module", module_name=module_name, error=str(e))
                continue
        cls._discovery_done = True

    # --- methods to specialize in subclasses ---
    @classmethod
    def _get_provider_folder(cls) -> str:
        raise NotImplementedError

    @classmethod
    def _get_provider_code_attr(cls) -> str:
        return "provider_code"


class TokenSourceRegistry(AbstractProviderRegistry):
    @classmethod
    def _get_provider_folder(cls) -> str:
        return "token_source_providers"


# Decorator factory
def register_provider(registry_class: Type[AbstractProviderRegistry]):
    """
    Decorator to register a provider class with the given registry.

    Example usage:
    @register_provider(TokenSourceRegistry)
    class MyTokenSource(TokenSourceProvider):
        ...
    """

    def decorator(provider_class: Type):
        registry_class.register(provider_class)
        return provider_class

    return decorator

"""Token source providers package. Modules placed here will be auto-discovered by
`provider_registry.TokenSourceRegistry.auto_discover()`.
"""
# Package marker for token source providers
__all__ = []

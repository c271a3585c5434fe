"""Provider API adapter."""

from tunesmith.boundary.provider.kie_client import KieClient, ProviderResponse

__all__ = ["KieClient", "ProviderResponse"]

# dataprovider/registry.py
from typing import Dict, Optional

from .adapters import RESTDataProvider
from .config import ClientConfig
from .exceptions import ClientNotFoundError
from .models import Resource
from .provider import DataProvider

class ProviderRegistry:
    """
    Keeps one provider per configured client.
    Providers are stored as: {client_name: provider}
    """
    def __init__(self):
        self._providers: Dict[str, DataProvider] = {}
        self._clients: Dict[str, ClientConfig] = {}

    @classmethod
    def from_config(cls, clients: Dict[str, ClientConfig], provider_config: Optional[Dict] = None):
        """Build a REST provider for every configured client"""
        registry = cls()
        for name, client in clients.items():
            registry.register(name, RESTDataProvider(client.url, provider_config), client)
        return registry

    def register(self, name: str, provider: DataProvider, client: Optional[ClientConfig] = None):
        """Register a provider (e.g., 'jsonplaceholder')"""
        self._providers[name] = provider
        if client is not None:
            self._clients[name] = client

    def get(self, name: str) -> DataProvider:
        if name not in self._providers:
            raise ClientNotFoundError(f"No provider registered for client '{name}'")
        return self._providers[name]

    def resource(self, client_name: str, resource_name: str) -> Resource:
        """Resolve a configured resource by its display name"""
        if client_name not in self._clients:
            raise ClientNotFoundError(f"No configuration registered for client '{client_name}'")
        return self._clients[client_name].get_resource(resource_name).to_resource()

    def clients(self):
        return list(self._providers)

    def close(self):
        for provider in self._providers.values():
            close = getattr(provider, "close", None)
            if close is not None:
                close()

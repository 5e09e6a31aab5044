"""Client singletons for external API interactions."""
from geomatch.clients.registry_client import RegistryClient

__all__ = ["RegistryClient"]

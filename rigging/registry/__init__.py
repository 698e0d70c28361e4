from .client_registry import ClientRegistry as ClientRegistry

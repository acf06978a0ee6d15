"""HTTP clients for external providers."""

from .service_client import ServiceClient

__all__ = ["ServiceClient"]

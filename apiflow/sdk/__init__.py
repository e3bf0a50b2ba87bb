"""SDK for talking to the design server."""

from apiflow.sdk.design_client import DEFAULT_SERVER_URL, HttpDesignGateway

__all__ = [
    "DEFAULT_SERVER_URL",
    "HttpDesignGateway",
]

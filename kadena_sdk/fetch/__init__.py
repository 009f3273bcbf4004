"""
Network operations for sending prepared commands to Chainweb nodes.
"""
from kadena_sdk.fetch.client import ApiClient
from kadena_sdk.fetch.config import ApiConfig, NetworkConfig

__all__ = ["ApiClient", "ApiConfig", "NetworkConfig"]

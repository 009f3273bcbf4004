"""
Configuration for talking to Chainweb Pact API endpoints.
"""
import dataclasses
import importlib.resources
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class NetworkConfig:
    """Known Chainweb networks, loaded from the bundled networks.json"""

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load the network table.

        KADENA_NETWORKS_FILE may point at a JSON file replacing the bundled one.
        The result is cached after the first load.
        """
        if cls._networks_cache is not None:
            return cls._networks_cache

        override = os.environ.get("KADENA_NETWORKS_FILE")
        if override:
            logger.debug(f"Loading networks from {override}")
            with open(override, "r", encoding="utf-8") as f:
                networks = json.load(f)
        else:
            resource = importlib.resources.files("kadena_sdk").joinpath("networks.json")
            networks = json.loads(resource.read_text(encoding="utf-8"))

        cls._networks_cache = networks
        return networks

    @classmethod
    def get_network(cls, network: str) -> Dict[str, Any]:
        """
        Get one network's configuration.

        Raises:
            ValueError: If the network is unknown
        """
        networks = cls.load_networks()
        if network not in networks:
            available = ", ".join(sorted(networks))
            raise ValueError(f"Unknown network '{network}'. Available networks: {available}")
        return networks[network]

    @classmethod
    def get_host(cls, network: str) -> str:
        return cls.get_network(network)["host"]


@dataclass(frozen=True)
class ApiConfig:
    """
    Where and how to reach a chain's Pact API.

    Attributes:
        host: Pact API base URL, e.g.
            https://api.testnet.chainweb.com/chainweb/0.0/testnet04/chain/0/pact
        timeout: Request timeout in seconds
        api_key: Optional key sent as the X-API-Key header
    """
    host: str
    timeout: int = DEFAULT_TIMEOUT
    api_key: Optional[str] = None

    @classmethod
    def new(cls, base_url: str, network: str, chain_id: str) -> "ApiConfig":
        """Build the config for one chain of a network served at base_url."""
        host = f"{base_url.rstrip('/')}/chainweb/0.0/{network}/chain/{chain_id}/pact"
        return cls(host=host)

    @classmethod
    def for_network(cls, network: str, chain_id: str) -> "ApiConfig":
        """
        Build the config for a known network, reading the API key from
        KADENA_API_KEY when set.
        """
        config = cls.new(NetworkConfig.get_host(network), network, chain_id)
        api_key = os.environ.get("KADENA_API_KEY")
        if api_key:
            config = config.with_api_key(api_key)
        return config

    def with_timeout(self, seconds: int) -> "ApiConfig":
        return dataclasses.replace(self, timeout=seconds)

    def with_api_key(self, api_key: str) -> "ApiConfig":
        return dataclasses.replace(self, api_key=api_key)

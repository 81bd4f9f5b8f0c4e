"""
Network Configuration
Resolves RPC endpoints and signing keys for the deployment networks
"""

import os
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional
from urllib.parse import urlparse
from loguru import logger
from dotenv import load_dotenv

load_dotenv()


# Both aliases read the same variables for now
NETWORKS: Dict[str, Dict[str, str]] = {
    'apechain': {
        'url_env': 'VITE_APECHAIN_RPC_URL',
        'key_env': 'VITE_APECHAIN_PRIVATE_KEY'
    },
    'curtis': {
        'url_env': 'VITE_APECHAIN_RPC_URL',
        'key_env': 'VITE_APECHAIN_PRIVATE_KEY'
    }
}

PRIVATE_KEY_PATTERN = re.compile(r'^(0x)?[0-9a-fA-F]{64}$')
URL_SCHEMES = ('http', 'https', 'ws', 'wss')


class ConfigurationError(ValueError):
    """Raised when a network descriptor cannot be used"""


@dataclass(frozen=True)
class NetworkDescriptor:
    """
    Connection settings for one named network

    Attributes:
        name: Network alias (e.g. 'apechain')
        url: RPC endpoint URL
        private_key: Hex-encoded signing key
        url_env: Environment variable the URL was read from
        key_env: Environment variable the key was read from
    """
    name: str
    url: Optional[str]
    private_key: Optional[str]
    url_env: str = ''
    key_env: str = ''

    def validate(self) -> 'NetworkDescriptor':
        """
        Check that the URL and signing key are usable

        Returns:
            The descriptor itself

        Raises:
            ConfigurationError: If either value is missing or malformed
        """
        if not self.private_key:
            raise ConfigurationError(
                f"{self.key_env or 'private key'} is not set for network '{self.name}'"
            )

        if not PRIVATE_KEY_PATTERN.match(self.private_key.strip()):
            # Never echo the key itself
            raise ConfigurationError(
                f"{self.key_env or 'private key'} for network '{self.name}' "
                f"is not a 32-byte hex private key"
            )

        if not self.url:
            raise ConfigurationError(
                f"{self.url_env or 'RPC URL'} is not set for network '{self.name}'"
            )

        parsed = urlparse(self.url.strip())
        if parsed.scheme not in URL_SCHEMES or not parsed.netloc:
            raise ConfigurationError(
                f"{self.url_env or 'RPC URL'} for network '{self.name}' "
                f"is not a valid endpoint: {self.url}"
            )

        return self

    def __repr__(self) -> str:
        key_state = 'set' if self.private_key else 'missing'
        return f"NetworkDescriptor(name={self.name!r}, url={self.url!r}, private_key=<{key_state}>)"


def load_networks(environ: Optional[Mapping[str, str]] = None) -> Dict[str, NetworkDescriptor]:
    """
    Build a descriptor for every configured network

    Values are read as-is; call validate() on a descriptor before using it.

    Args:
        environ: Environment mapping (None = os.environ)

    Returns:
        Mapping of network alias to descriptor
    """
    env = os.environ if environ is None else environ
    networks = {}

    for name, network_config in NETWORKS.items():
        networks[name] = NetworkDescriptor(
            name=name,
            url=env.get(network_config['url_env']),
            private_key=env.get(network_config['key_env']),
            url_env=network_config['url_env'],
            key_env=network_config['key_env']
        )

    logger.debug(f"Loaded {len(networks)} network descriptors")
    return networks


def get_network(name: str, environ: Optional[Mapping[str, str]] = None) -> NetworkDescriptor:
    """
    Get the descriptor for a single network

    Args:
        name: Network alias
        environ: Environment mapping (None = os.environ)

    Returns:
        NetworkDescriptor

    Raises:
        ConfigurationError: If the alias is unknown
    """
    networks = load_networks(environ)
    key = name.lower()

    if key not in networks:
        raise ConfigurationError(
            f"Unknown network '{name}' (available: {', '.join(list_networks())})"
        )

    return networks[key]


def list_networks() -> List[str]:
    """List all configured network aliases"""
    return list(NETWORKS.keys())

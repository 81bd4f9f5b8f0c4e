"""
Deployment Runner
Deploys a compiled contract with fixed gas parameters and waits for confirmation
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union
from web3 import Web3
from loguru import logger

from .artifacts import load_artifact
from .chain_client import ChainClient
from .network_config import NetworkDescriptor


DEFAULT_CONTRACT = 'LandForm'
DEFAULT_GAS_PRICE = Web3.to_wei(1, 'gwei')
DEFAULT_GAS_LIMIT = 3_000_000
DEFAULT_CONFIRMATION_TIMEOUT = 300


class DeploymentError(Exception):
    """Any failure between loading configuration and confirmation"""


@dataclass(frozen=True)
class DeploymentRequest:
    """What to deploy and at which gas settings"""
    contract_name: str = DEFAULT_CONTRACT
    gas_price: int = DEFAULT_GAS_PRICE
    gas_limit: int = DEFAULT_GAS_LIMIT
    constructor_args: Tuple = field(default_factory=tuple)

    @property
    def max_cost_wei(self) -> int:
        return self.gas_price * self.gas_limit


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of a confirmed deployment"""
    contract_name: str
    network: str
    address: str
    tx_hash: str
    gas_used: Optional[int] = None
    block_number: Optional[int] = None


class DeploymentRunner:
    """
    Runs one deployment per call to run()

    Every call submits a new transaction; nothing is cached between calls.
    """

    def __init__(
        self,
        network: NetworkDescriptor,
        client: Optional[ChainClient] = None,
        artifacts_dir: Union[str, Path] = 'artifacts',
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT
    ):
        """
        Initialize Deployment Runner

        Args:
            network: Network descriptor (validated before use)
            client: Chain client (None = connect lazily from network)
            artifacts_dir: Hardhat artifacts directory
            confirmation_timeout: Seconds to wait for the receipt
        """
        self.network = network
        self.client = client
        self.artifacts_dir = artifacts_dir
        self.confirmation_timeout = confirmation_timeout

    def _get_client(self) -> ChainClient:
        if self.client is None:
            self.client = ChainClient(self.network)
        return self.client

    def run(self, request: Optional[DeploymentRequest] = None) -> DeploymentResult:
        """
        Deploy a contract and wait for it to be mined

        Args:
            request: Deployment request (None = LandForm at default gas)

        Returns:
            DeploymentResult

        Raises:
            DeploymentError: On any failure, with the cause chained
        """
        request = request or DeploymentRequest()

        try:
            self.network.validate()

            artifact = load_artifact(request.contract_name, self.artifacts_dir)
            client = self._get_client()

            logger.info(f"Deploying {artifact.contract_name} to {self.network.name}")
            logger.info(f"Gas limit: {request.gas_limit}")
            logger.info(f"Gas price: {Web3.from_wei(request.gas_price, 'gwei')} gwei")

            client.check_funds(request.max_cost_wei)

            factory = client.get_contract_factory(artifact)
            pending = factory.deploy(
                request.gas_price,
                request.gas_limit,
                *request.constructor_args
            )

            receipt = pending.wait_for_deployment(timeout=self.confirmation_timeout)

            result = DeploymentResult(
                contract_name=artifact.contract_name,
                network=self.network.name,
                address=pending.address,
                tx_hash=pending.tx_hash_hex,
                gas_used=receipt.get('gasUsed'),
                block_number=receipt.get('blockNumber')
            )

        except Exception as e:
            raise DeploymentError(f"Deployment of {request.contract_name} failed: {e}") from e

        logger.success(f"Contract deployed at {result.address}")
        logger.success(f"Transaction hash: {result.tx_hash}")
        logger.success(f"Gas used: {result.gas_used}")

        return result

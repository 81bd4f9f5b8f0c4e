"""
Chain Client
Wraps Web3 for contract factory creation, signing and confirmation
"""

from typing import Any, Dict, Optional
from decimal import Decimal
from web3 import Web3
from eth_account import Account
from loguru import logger

from .artifacts import ContractArtifact
from .network_config import NetworkDescriptor


class ContractRevertedError(Exception):
    """Raised when a deployment transaction is mined with status 0"""

    def __init__(self, tx_hash: str, receipt: Dict):
        self.tx_hash = tx_hash
        self.receipt = receipt
        super().__init__(f"Deployment transaction {tx_hash} reverted")


class PendingDeployment:
    """A broadcast deployment transaction awaiting inclusion"""

    def __init__(self, w3: Web3, contract_name: str, tx_hash):
        self.w3 = w3
        self.contract_name = contract_name
        self.tx_hash = tx_hash
        self.receipt = None

    @property
    def tx_hash_hex(self) -> str:
        value = self.tx_hash.hex()
        return value if value.startswith('0x') else f"0x{value}"

    def wait_for_deployment(self, timeout: float = 300) -> Dict:
        """
        Block until the transaction is mined

        Args:
            timeout: Seconds to wait for the receipt

        Returns:
            Transaction receipt

        Raises:
            web3.exceptions.TimeExhausted: If no receipt arrives in time
            ContractRevertedError: If the constructor reverted
        """
        logger.info(f"Waiting for confirmation of {self.tx_hash_hex} (timeout {timeout}s)...")

        receipt = self.w3.eth.wait_for_transaction_receipt(self.tx_hash, timeout=timeout)

        if receipt['status'] != 1:
            raise ContractRevertedError(self.tx_hash_hex, receipt)

        self.receipt = receipt
        return receipt

    @property
    def address(self) -> Optional[str]:
        """Deployed contract address, known once confirmed"""
        if self.receipt is None:
            return None
        return Web3.to_checksum_address(self.receipt['contractAddress'])


class ContractFactory:
    """Builds and submits contract-creation transactions for one artifact"""

    def __init__(self, client: 'ChainClient', artifact: ContractArtifact):
        self.client = client
        self.artifact = artifact
        self.contract = client.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    def build_transaction(self, gas_price: int, gas_limit: int, *constructor_args) -> Dict[str, Any]:
        """
        Build an unsigned legacy deployment transaction

        Args:
            gas_price: Gas price in wei
            gas_limit: Gas limit
            constructor_args: Constructor arguments

        Returns:
            Transaction dict
        """
        w3 = self.client.w3
        sender = self.client.deployer_address

        return self.contract.constructor(*constructor_args).build_transaction({
            'from': sender,
            'nonce': w3.eth.get_transaction_count(sender, 'pending'),
            'gas': gas_limit,
            'gasPrice': gas_price,
            'chainId': w3.eth.chain_id
        })

    def deploy(self, gas_price: int, gas_limit: int, *constructor_args) -> PendingDeployment:
        """
        Sign and broadcast a deployment transaction

        Returns:
            PendingDeployment for the broadcast transaction
        """
        transaction = self.build_transaction(gas_price, gas_limit, *constructor_args)

        logger.info("Signing transaction...")
        signed_tx = self.client.sign_transaction(transaction)

        logger.info("Sending deployment transaction...")
        tx_hash = self.client.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

        pending = PendingDeployment(self.client.w3, self.artifact.contract_name, tx_hash)
        logger.info(f"Transaction sent: {pending.tx_hash_hex}")
        return pending


class ChainClient:
    """
    Connection to one network with its signing account
    """

    def __init__(self, network: NetworkDescriptor, w3: Optional[Web3] = None):
        """
        Initialize Chain Client

        Args:
            network: Validated network descriptor
            w3: Existing Web3 instance (None = connect to network.url)
        """
        self.network = network
        self.w3 = w3 if w3 is not None else self._connect_web3()
        self.account = Account.from_key(network.private_key.strip())

        logger.info(f"Connected to {network.name}, deploying from: {self.account.address}")

    def _connect_web3(self) -> Web3:
        """Return a connected Web3 instance or raise if unreachable"""
        w3 = Web3(Web3.HTTPProvider(self.network.url.strip()))

        if not w3.is_connected():
            raise ConnectionError(f"Failed to connect to RPC endpoint for network '{self.network.name}'")

        return w3

    @property
    def deployer_address(self) -> str:
        return self.account.address

    def get_balance(self) -> int:
        """Native balance of the deployer in wei"""
        return self.w3.eth.get_balance(self.account.address)

    def sign_transaction(self, transaction: Dict):
        try:
            return self.account.sign_transaction(transaction)
        except Exception as e:
            logger.error(f"Error signing transaction: {e}")
            raise

    def get_contract_factory(self, artifact: ContractArtifact) -> ContractFactory:
        return ContractFactory(self, artifact)

    def check_funds(self, max_cost_wei: int) -> bool:
        """
        Log deployer balance against the worst-case deployment cost

        Args:
            max_cost_wei: gas_limit * gas_price

        Returns:
            True if the balance covers the cost
        """
        balance = self.get_balance()
        balance_eth = Decimal(balance) / Decimal(10 ** 18)
        cost_eth = Decimal(max_cost_wei) / Decimal(10 ** 18)

        logger.info(f"Account balance: {balance_eth} (max deployment cost: {cost_eth})")

        if balance < max_cost_wei:
            logger.warning("Balance may be insufficient for deployment")
            return False

        return True

"""
Contract Factory
Deploys new instances of a compiled contract and tracks their confirmation
"""

from typing import Dict, Optional
from web3 import Web3
from loguru import logger

from .artifacts import ContractArtifact
from .errors import DeploymentError
from .signer import Signer


class ContractFactory:
    """
    Deploys new instances of a single contract artifact
    """

    GAS_BUFFER = 1.2  # 20% on top of the estimate

    def __init__(
        self,
        w3: Web3,
        artifact: ContractArtifact,
        signer: Signer,
        chain_id: Optional[int] = None
    ):
        """
        Initialize Contract Factory

        Args:
            w3: Web3 instance
            artifact: Compiled contract artifact
            signer: Deployer account
            chain_id: Chain id for the deployment transaction (None = ask the node)
        """
        if not artifact.is_deployable:
            raise DeploymentError(
                f"Contract {artifact.contract_name} is abstract and can't be deployed"
            )

        self.w3 = w3
        self.artifact = artifact
        self.signer = signer
        self.chain_id = chain_id
        self.contract = w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)

    def deploy(self, *constructor_args) -> "DeployedContract":
        """
        Send the deployment transaction

        Returns as soon as the node has accepted the transaction; use
        DeployedContract.wait_for_deployment() to wait for it to be mined.

        Args:
            constructor_args: Arguments for the contract constructor

        Returns:
            DeployedContract handle
        """
        constructor = self.contract.constructor(*constructor_args)

        gas_estimate = constructor.estimate_gas({'from': self.signer.address})
        gas_limit = int(gas_estimate * self.GAS_BUFFER)

        tx_params = {
            'from': self.signer.address,
            'nonce': self.signer.get_nonce(),
            'gas': gas_limit,
            'chainId': self.chain_id if self.chain_id is not None else self.w3.eth.chain_id
        }
        tx_params.update(self._get_fee_params())

        logger.debug(f"Deployment params for {self.artifact.contract_name}: {tx_params}")

        transaction = constructor.build_transaction(tx_params)
        tx_hash = self.signer.send_transaction(transaction)

        logger.info(f"Deployment transaction sent: {Web3.to_hex(tx_hash)}")
        return DeployedContract(self.w3, self.artifact, tx_hash)

    def _get_fee_params(self) -> Dict[str, int]:
        """EIP-1559 fees when the chain has a base fee, legacy gas price otherwise"""
        latest_block = self.w3.eth.get_block('latest')
        base_fee_wei = latest_block.get('baseFeePerGas')

        if base_fee_wei is None:
            return {'gasPrice': self.w3.eth.gas_price}

        priority_fee_wei = self.w3.eth.max_priority_fee

        return {
            'maxFeePerGas': int(base_fee_wei * 2 + priority_fee_wei),
            'maxPriorityFeePerGas': int(priority_fee_wei)
        }


class DeployedContract:
    """
    Handle for a contract whose deployment transaction has been sent
    """

    def __init__(self, w3: Web3, artifact: ContractArtifact, tx_hash: bytes):
        self.w3 = w3
        self.artifact = artifact
        self.tx_hash = tx_hash
        self.receipt = None
        self.address = None

    def wait_for_deployment(self, timeout: Optional[float] = None) -> "DeployedContract":
        """
        Block until the deployment transaction is mined

        Args:
            timeout: Seconds to wait for the receipt (None = web3 default)

        Returns:
            self
        """
        if self.receipt is not None:
            return self

        tx_hash_hex = Web3.to_hex(self.tx_hash)
        logger.info(f"Waiting for confirmation of {tx_hash_hex}...")

        if timeout is None:
            receipt = self.w3.eth.wait_for_transaction_receipt(self.tx_hash)
        else:
            receipt = self.w3.eth.wait_for_transaction_receipt(self.tx_hash, timeout=timeout)

        if receipt['status'] != 1:
            raise DeploymentError(f"Deployment transaction {tx_hash_hex} reverted")

        contract_address = receipt.get('contractAddress')

        if not contract_address:
            raise DeploymentError(f"Receipt of {tx_hash_hex} has no contract address")

        code = self.w3.eth.get_code(contract_address)

        if len(code) == 0:
            raise DeploymentError(f"No contract code at {contract_address}")

        self.receipt = receipt
        self.address = Web3.to_checksum_address(contract_address)

        logger.success(
            f"{self.artifact.contract_name} deployed at {self.address} "
            f"(gas used: {receipt['gasUsed']})"
        )
        return self

    def get_address(self) -> str:
        """Deployed address; only available once the deployment is confirmed"""
        if self.address is None:
            raise DeploymentError(
                f"{self.artifact.contract_name} deployment not confirmed yet"
            )

        return self.address

    @property
    def contract(self):
        """Web3 contract instance bound to the deployed address"""
        return self.w3.eth.contract(address=self.get_address(), abi=self.artifact.abi)

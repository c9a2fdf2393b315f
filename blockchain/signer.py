"""
Deployer Signer
Account that pays for and signs deployment transactions
"""

from typing import Dict, Optional
from web3 import Web3
from eth_account import Account
from eth_account.signers.local import LocalAccount
from loguru import logger

from .errors import DeploymentError


class Signer:
    """
    Deployer account, either:
    - Local: private key held in-process, transactions signed locally
    - Node: account unlocked on the node (Hardhat / Anvil dev accounts)
    """

    def __init__(self, w3: Web3, address: str, account: Optional[LocalAccount] = None):
        """
        Initialize Signer

        Args:
            w3: Web3 instance
            address: Deployer address
            account: Local account (None for node-managed accounts)
        """
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)
        self.account = account

    @classmethod
    def from_private_key(cls, w3: Web3, private_key: str) -> "Signer":
        """Create a signer from a hex private key"""
        try:
            account = Account.from_key(private_key)
        except Exception as e:
            raise ValueError(f"Invalid deployer private key: {e}") from e

        logger.info(f"Deployer (local key): {account.address}")
        return cls(w3, account.address, account)

    @classmethod
    def from_node(cls, w3: Web3, index: int = 0) -> "Signer":
        """Use one of the accounts unlocked on the connected node"""
        accounts = w3.eth.accounts

        if len(accounts) <= index:
            raise DeploymentError(
                "No deployer account available: set DEPLOYER_PRIVATE_KEY "
                "or use a node with unlocked accounts"
            )

        logger.info(f"Deployer (node account #{index}): {accounts[index]}")
        return cls(w3, accounts[index])

    @property
    def is_local(self) -> bool:
        return self.account is not None

    def get_nonce(self) -> int:
        """Next nonce for the deployer, pending transactions included"""
        return self.w3.eth.get_transaction_count(self.address, 'pending')

    def get_balance(self) -> int:
        """Deployer balance in wei"""
        return self.w3.eth.get_balance(self.address)

    def send_transaction(self, transaction: Dict) -> bytes:
        """
        Sign (if local) and send a transaction

        Args:
            transaction: Transaction dict

        Returns:
            Transaction hash
        """
        if not self.is_local:
            return self.w3.eth.send_transaction(transaction)

        signed_tx = self.account.sign_transaction(transaction)
        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)

"""
System Check Script
Verifies configuration, connection and artifacts before deploying

Run from the project root: python -m scripts.check_system
"""

import sys
from web3 import Web3
from loguru import logger

from blockchain import Signer, load_artifact
from utils.logging_setup import configure_logging
from utils.network_config import load_network_config


CONTRACT_NAME = "Project"
MIN_BALANCE_ETH = 0.01


def check_network_config(state: dict) -> bool:
    """Check that the target network is configured"""
    logger.info("Checking network configuration...")

    config = load_network_config()
    state['config'] = config

    logger.success(f"  ✓ Network: {config.name} ({config.rpc_url})")

    if not config.private_key:
        logger.info("  No deployer key set - the node's first account will be used")

    return True


def check_rpc_connection(state: dict) -> bool:
    """Check RPC endpoint connection and chain id"""
    logger.info("Checking RPC connection...")

    config = state['config']
    w3 = Web3(Web3.HTTPProvider(config.rpc_url))

    if not w3.is_connected():
        logger.error(f"  ✗ Cannot connect to {config.rpc_url}")
        return False

    state['w3'] = w3
    chain_id = w3.eth.chain_id

    if config.chain_id is not None and chain_id != config.chain_id:
        logger.error(f"  ✗ Chain id mismatch: node {chain_id}, config {config.chain_id}")
        return False

    logger.success(f"  ✓ Connected (chain {chain_id}, block {w3.eth.block_number})")
    return True


def check_deployer_balance(state: dict) -> bool:
    """Check that the deployer can pay for the deployment"""
    logger.info("Checking deployer balance...")

    w3 = state.get('w3')
    if w3 is None:
        logger.warning("  No connection - skipping balance check")
        return False

    config = state['config']
    if config.private_key:
        signer = Signer.from_private_key(w3, config.private_key)
    else:
        signer = Signer.from_node(w3)

    balance = w3.from_wei(signer.get_balance(), 'ether')
    logger.info(f"  Deployer {signer.address}: {balance:.4f} ETH")

    if balance < MIN_BALANCE_ETH:
        logger.error(f"  ✗ Balance low (need at least {MIN_BALANCE_ETH} ETH)")
        return False

    logger.success("  ✓ Deployer balance sufficient")
    return True


def check_artifact(state: dict) -> bool:
    """Check that a deployable artifact exists for the contract"""
    logger.info(f"Checking {CONTRACT_NAME} artifact...")

    artifact = load_artifact(CONTRACT_NAME, state['config'].artifacts_dir)

    if not artifact.is_deployable:
        logger.error(f"  ✗ {artifact.fully_qualified_name} is abstract")
        return False

    logger.success(f"  ✓ {artifact.fully_qualified_name}")
    return True


def main() -> int:
    """Run all system checks"""
    configure_logging(level="INFO")

    logger.info("=" * 70)
    logger.info("Deployment System Check")
    logger.info("=" * 70)

    checks = [
        ("Network Configuration", check_network_config),
        ("RPC Connection", check_rpc_connection),
        ("Deployer Balance", check_deployer_balance),
        ("Contract Artifact", check_artifact)
    ]

    state = {}
    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func(state)
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            result = False

        results.append((name, result))

        # every later check needs the network config
        if name == "Network Configuration" and not result:
            break

    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(checks)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python deploy.py")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Contract Artifacts
Resolves compiled contract artifacts (Hardhat layout) by contract name
"""

import os
import json
from dataclasses import dataclass
from typing import Dict, List
from loguru import logger

from .errors import ArtifactNotFoundError


DEFAULT_ARTIFACTS_DIR = "artifacts"

# Hardhat writes build-info and *.dbg.json next to the real artifacts
IGNORED_DIRS = {"build-info"}
DEBUG_SUFFIX = ".dbg.json"


@dataclass
class ContractArtifact:
    """ABI and creation bytecode of a compiled contract"""

    contract_name: str
    source_name: str
    abi: List[Dict]
    bytecode: str

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @property
    def is_deployable(self) -> bool:
        """Interfaces and abstract contracts compile to empty bytecode"""
        return self.bytecode not in ("", "0x")


def load_artifact(name: str, artifacts_dir: str = DEFAULT_ARTIFACTS_DIR) -> ContractArtifact:
    """
    Load a contract artifact by name

    Args:
        name: Contract name ("Project") or fully qualified
            name ("contracts/Project.sol:Project")
        artifacts_dir: Root of the artifacts tree

    Returns:
        ContractArtifact
    """
    if ":" in name:
        source_name, contract_name = name.rsplit(":", 1)
        path = os.path.join(artifacts_dir, source_name, f"{contract_name}.json")

        if not os.path.isfile(path):
            raise ArtifactNotFoundError(f"Artifact for contract \"{name}\" not found at {path}")

        return _read_artifact(path)

    candidates = _find_artifact_paths(name, artifacts_dir)

    if not candidates:
        raise ArtifactNotFoundError(
            f"Artifact for contract \"{name}\" not found in {artifacts_dir}. "
            "Run 'npx hardhat compile' first"
        )

    if len(candidates) > 1:
        names = ", ".join(
            f"{os.path.relpath(os.path.dirname(p), artifacts_dir)}:{name}"
            for p in candidates
        )
        raise ArtifactNotFoundError(
            f"Multiple artifacts for contract \"{name}\", use a fully qualified name: {names}"
        )

    return _read_artifact(candidates[0])


def _find_artifact_paths(contract_name: str, artifacts_dir: str) -> List[str]:
    """Find every artifact file named <contract_name>.json under artifacts_dir"""
    if not os.path.isdir(artifacts_dir):
        return []

    target = f"{contract_name}.json"
    matches = []

    for root, dirs, files in os.walk(artifacts_dir):
        dirs[:] = sorted(d for d in dirs if d not in IGNORED_DIRS)

        for file_name in files:
            if file_name == target and not file_name.endswith(DEBUG_SUFFIX):
                matches.append(os.path.join(root, file_name))

    return sorted(matches)


def _read_artifact(path: str) -> ContractArtifact:
    """Parse an artifact JSON file"""
    try:
        with open(path, 'r') as f:
            contract_json = json.load(f)
    except json.JSONDecodeError as e:
        raise ArtifactNotFoundError(f"Invalid artifact {path}: {e}") from e

    if 'abi' not in contract_json or 'bytecode' not in contract_json:
        raise ArtifactNotFoundError(f"Artifact {path} has no abi/bytecode")

    contract_name = contract_json.get(
        'contractName',
        os.path.splitext(os.path.basename(path))[0]
    )
    source_name = contract_json.get(
        'sourceName',
        os.path.basename(os.path.dirname(path))
    )

    logger.debug(f"Loaded artifact {source_name}:{contract_name} from {path}")

    return ContractArtifact(
        contract_name=contract_name,
        source_name=source_name,
        abi=contract_json['abi'],
        bytecode=contract_json['bytecode'],
    )

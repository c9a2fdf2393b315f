"""
Unit Tests for Artifact Lookup
"""

import json
import pytest

from blockchain.artifacts import load_artifact
from blockchain.errors import ArtifactNotFoundError, DeploymentError


ABI = [{"inputs": [], "stateMutability": "nonpayable", "type": "constructor"}]
BYTECODE = "0x6080604052348015600f57600080fd5b50"


def write_artifact(root, source_name, contract_name, bytecode=BYTECODE, **extra):
    """Write a Hardhat-style artifact (plus its .dbg.json) under root"""
    directory = root / source_name
    directory.mkdir(parents=True, exist_ok=True)

    artifact = {
        "_format": "hh-sol-artifact-1",
        "contractName": contract_name,
        "sourceName": source_name,
        "abi": ABI,
        "bytecode": bytecode,
        "deployedBytecode": bytecode,
    }
    artifact.update(extra)

    (directory / f"{contract_name}.json").write_text(json.dumps(artifact))
    (directory / f"{contract_name}.dbg.json").write_text(
        json.dumps({"_format": "hh-sol-dbg-1", "buildInfo": "../../build-info/abc.json"})
    )
    return directory / f"{contract_name}.json"


@pytest.fixture
def artifacts_dir(tmp_path):
    root = tmp_path / "artifacts"
    write_artifact(root, "contracts/Project.sol", "Project")
    (root / "build-info").mkdir()
    (root / "build-info" / "abc.json").write_text("{}")
    return root


class TestLoadArtifact:
    """Test artifact resolution by name"""

    def test_load_by_name(self, artifacts_dir):
        artifact = load_artifact("Project", str(artifacts_dir))

        assert artifact.contract_name == "Project"
        assert artifact.source_name == "contracts/Project.sol"
        assert artifact.abi == ABI
        assert artifact.bytecode == BYTECODE
        assert artifact.is_deployable

    def test_load_by_fully_qualified_name(self, artifacts_dir):
        artifact = load_artifact("contracts/Project.sol:Project", str(artifacts_dir))

        assert artifact.fully_qualified_name == "contracts/Project.sol:Project"

    def test_missing_artifact(self, artifacts_dir):
        with pytest.raises(ArtifactNotFoundError, match="Token"):
            load_artifact("Token", str(artifacts_dir))

    def test_missing_artifacts_dir(self, tmp_path):
        with pytest.raises(ArtifactNotFoundError, match="hardhat compile"):
            load_artifact("Project", str(tmp_path / "nowhere"))

    def test_missing_fully_qualified_artifact(self, artifacts_dir):
        with pytest.raises(ArtifactNotFoundError):
            load_artifact("contracts/Other.sol:Project", str(artifacts_dir))

    def test_ambiguous_name(self, artifacts_dir):
        write_artifact(artifacts_dir, "contracts/legacy/Project.sol", "Project")

        with pytest.raises(ArtifactNotFoundError, match="fully qualified") as exc_info:
            load_artifact("Project", str(artifacts_dir))

        assert "contracts/legacy/Project.sol:Project" in str(exc_info.value)

        # still reachable with its fully qualified name
        artifact = load_artifact("contracts/legacy/Project.sol:Project", str(artifacts_dir))
        assert artifact.source_name == "contracts/legacy/Project.sol"

    def test_interface_is_not_deployable(self, artifacts_dir):
        write_artifact(artifacts_dir, "contracts/IProject.sol", "IProject", bytecode="0x")

        artifact = load_artifact("IProject", str(artifacts_dir))

        assert not artifact.is_deployable

    def test_artifact_without_bytecode(self, artifacts_dir):
        path = artifacts_dir / "contracts/Broken.sol" / "Broken.json"
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"abi": ABI}))

        with pytest.raises(ArtifactNotFoundError, match="abi/bytecode"):
            load_artifact("Broken", str(artifacts_dir))

    def test_invalid_json(self, artifacts_dir):
        path = artifacts_dir / "contracts/Bad.sol" / "Bad.json"
        path.parent.mkdir(parents=True)
        path.write_text("{not json")

        with pytest.raises(ArtifactNotFoundError, match="Invalid artifact"):
            load_artifact("Bad", str(artifacts_dir))

    def test_artifact_errors_are_deployment_errors(self):
        assert issubclass(ArtifactNotFoundError, DeploymentError)

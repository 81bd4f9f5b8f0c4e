"""
Contract Artifacts
Loads compiled contract ABI and bytecode from Hardhat artifacts
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union
from loguru import logger


class ArtifactNotFoundError(FileNotFoundError):
    """Raised when a contract name does not resolve to a deployable artifact"""


@dataclass
class ContractArtifact:
    """Compiled contract as produced by `npx hardhat compile`"""
    contract_name: str
    source_name: str
    abi: List[Dict] = field(default_factory=list)
    bytecode: str = '0x'
    path: Optional[Path] = None

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @property
    def is_deployable(self) -> bool:
        code = self.bytecode[2:] if self.bytecode.startswith('0x') else self.bytecode
        return len(code) > 0


def _find_artifact_paths(contract_name: str, artifacts_dir: Path) -> List[Path]:
    """Find candidate artifact files for a bare contract name"""
    matches = []

    for path in sorted(artifacts_dir.rglob(f"{contract_name}.json")):
        if 'build-info' in path.parts or path.name.endswith('.dbg.json'):
            continue
        matches.append(path)

    return matches


def resolve_artifact_path(contract_name: str, artifacts_dir: Union[str, Path] = 'artifacts') -> Path:
    """
    Resolve a contract name to its artifact file

    Args:
        contract_name: Bare name ('LandForm') or fully qualified
            name ('contracts/LandForm.sol:LandForm')
        artifacts_dir: Hardhat artifacts directory

    Returns:
        Path to the artifact JSON

    Raises:
        ArtifactNotFoundError: If the name is missing or ambiguous
    """
    artifacts_dir = Path(artifacts_dir)

    if not artifacts_dir.is_dir():
        raise ArtifactNotFoundError(
            f"Artifacts directory not found: {artifacts_dir} (run 'npx hardhat compile' first)"
        )

    if ':' in contract_name:
        source_name, name = contract_name.rsplit(':', 1)
        path = artifacts_dir / source_name / f"{name}.json"

        if not path.is_file():
            raise ArtifactNotFoundError(f"Artifact for {contract_name} not found at {path}")

        return path

    matches = _find_artifact_paths(contract_name, artifacts_dir)

    if not matches:
        raise ArtifactNotFoundError(
            f"Artifact for contract '{contract_name}' not found in {artifacts_dir}"
        )

    if len(matches) > 1:
        candidates = ', '.join(
            f"{path.parent.relative_to(artifacts_dir).as_posix()}:{contract_name}"
            for path in matches
        )
        raise ArtifactNotFoundError(
            f"Multiple artifacts for contract '{contract_name}', "
            f"use a fully qualified name: {candidates}"
        )

    return matches[0]


def load_artifact(contract_name: str, artifacts_dir: Union[str, Path] = 'artifacts') -> ContractArtifact:
    """
    Load a deployable contract artifact

    Args:
        contract_name: Bare or fully qualified contract name
        artifacts_dir: Hardhat artifacts directory

    Returns:
        ContractArtifact

    Raises:
        ArtifactNotFoundError: If the artifact is missing, ambiguous or abstract
    """
    path = resolve_artifact_path(contract_name, artifacts_dir)

    with open(path, 'r') as f:
        contract_json = json.load(f)

    if 'abi' not in contract_json or 'bytecode' not in contract_json:
        raise ArtifactNotFoundError(f"Artifact {path} has no abi/bytecode")

    artifact = ContractArtifact(
        contract_name=contract_json.get('contractName', path.stem),
        source_name=contract_json.get('sourceName', path.parent.name),
        abi=contract_json['abi'],
        bytecode=contract_json['bytecode'],
        path=path
    )

    if not artifact.is_deployable:
        raise ArtifactNotFoundError(
            f"Contract {artifact.fully_qualified_name} is abstract and can't be deployed"
        )

    logger.debug(f"Loaded artifact {artifact.fully_qualified_name} from {path}")
    return artifact

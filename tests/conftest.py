"""
Shared fixtures for deployment tests
"""

import json
import pytest


# Hardhat's first default account; never holds real funds
TEST_PRIVATE_KEY = '0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80'
TEST_DEPLOYER = '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'
TEST_RPC_URL = 'https://curtis.rpc.caldera.xyz/http'

LANDFORM_BYTECODE = (
    '0x6080604052348015600e575f80fd5b50603e80601a5f395ff3fe60806040525f80fd'
    'fea2646970667358221220000000000000000000000000000000000000000000000000'
    '000000000000000064736f6c634300081c0033'
)


def write_artifact(artifacts_dir, source_name, contract_name, bytecode=LANDFORM_BYTECODE):
    """Write a Hardhat-style artifact and its .dbg.json companion"""
    contract_dir = artifacts_dir / source_name
    contract_dir.mkdir(parents=True, exist_ok=True)

    artifact = {
        '_format': 'hh-sol-artifact-1',
        'contractName': contract_name,
        'sourceName': source_name,
        'abi': [
            {'inputs': [], 'stateMutability': 'nonpayable', 'type': 'constructor'}
        ],
        'bytecode': bytecode,
        'deployedBytecode': '0x',
        'linkReferences': {},
        'deployedLinkReferences': {}
    }

    (contract_dir / f"{contract_name}.json").write_text(json.dumps(artifact))
    (contract_dir / f"{contract_name}.dbg.json").write_text(
        json.dumps({'_format': 'hh-sol-dbg-1', 'buildInfo': '../../build-info/abc.json'})
    )
    return contract_dir / f"{contract_name}.json"


@pytest.fixture
def artifacts_dir(tmp_path):
    """Artifacts directory containing a compiled LandForm"""
    directory = tmp_path / 'artifacts'
    write_artifact(directory, 'contracts/LandForm.sol', 'LandForm')
    (directory / 'build-info').mkdir()
    (directory / 'build-info' / 'abc.json').write_text('{}')
    return directory


@pytest.fixture
def deploy_env():
    """Environment with both required variables set"""
    return {
        'VITE_APECHAIN_RPC_URL': TEST_RPC_URL,
        'VITE_APECHAIN_PRIVATE_KEY': TEST_PRIVATE_KEY
    }

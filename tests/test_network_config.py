"""
Unit Tests for Network Configuration
"""

import pytest

from deployer.network_config import (
    ConfigurationError,
    NetworkDescriptor,
    get_network,
    list_networks,
    load_networks
)
from tests.conftest import TEST_PRIVATE_KEY, TEST_RPC_URL


class TestLoadNetworks:
    """Test descriptor loading from the environment"""

    def test_both_aliases_configured(self, deploy_env):
        networks = load_networks(deploy_env)

        assert set(networks.keys()) == {'apechain', 'curtis'}
        assert list_networks() == ['apechain', 'curtis']

    def test_aliases_share_url_and_key(self, deploy_env):
        networks = load_networks(deploy_env)

        apechain = networks['apechain']
        curtis = networks['curtis']

        assert apechain.url == curtis.url == TEST_RPC_URL
        assert apechain.private_key == curtis.private_key == TEST_PRIVATE_KEY
        assert apechain.name != curtis.name

    def test_missing_values_load_without_error(self):
        networks = load_networks({})

        assert networks['apechain'].url is None
        assert networks['apechain'].private_key is None

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv('VITE_APECHAIN_RPC_URL', 'http://127.0.0.1:8545')
        monkeypatch.setenv('VITE_APECHAIN_PRIVATE_KEY', TEST_PRIVATE_KEY)

        network = get_network('apechain')

        assert network.url == 'http://127.0.0.1:8545'

    def test_get_network_is_case_insensitive(self, deploy_env):
        assert get_network('Curtis', deploy_env).name == 'curtis'

    def test_unknown_network(self, deploy_env):
        with pytest.raises(ConfigurationError, match="Unknown network 'hardhat'"):
            get_network('hardhat', deploy_env)


class TestNetworkDescriptorValidation:
    """Test descriptor invariants"""

    def test_valid_descriptor(self, deploy_env):
        network = get_network('curtis', deploy_env)

        assert network.validate() is network

    def test_key_without_prefix_is_valid(self, deploy_env):
        deploy_env['VITE_APECHAIN_PRIVATE_KEY'] = TEST_PRIVATE_KEY[2:]

        get_network('curtis', deploy_env).validate()

    def test_missing_key(self, deploy_env):
        del deploy_env['VITE_APECHAIN_PRIVATE_KEY']

        with pytest.raises(ConfigurationError, match='VITE_APECHAIN_PRIVATE_KEY is not set'):
            get_network('curtis', deploy_env).validate()

    def test_malformed_key_not_echoed(self, deploy_env):
        deploy_env['VITE_APECHAIN_PRIVATE_KEY'] = '0xdeadbeef'

        with pytest.raises(ConfigurationError) as exc_info:
            get_network('curtis', deploy_env).validate()

        assert 'VITE_APECHAIN_PRIVATE_KEY' in str(exc_info.value)
        assert 'deadbeef' not in str(exc_info.value)

    def test_missing_url(self, deploy_env):
        del deploy_env['VITE_APECHAIN_RPC_URL']

        with pytest.raises(ConfigurationError, match='VITE_APECHAIN_RPC_URL is not set'):
            get_network('apechain', deploy_env).validate()

    @pytest.mark.parametrize('url', ['curtis.rpc.caldera.xyz', 'ftp://example.com', 'https://'])
    def test_malformed_url(self, deploy_env, url):
        deploy_env['VITE_APECHAIN_RPC_URL'] = url

        with pytest.raises(ConfigurationError, match='not a valid endpoint'):
            get_network('apechain', deploy_env).validate()

    def test_repr_hides_key(self):
        network = NetworkDescriptor(name='curtis', url=TEST_RPC_URL, private_key=TEST_PRIVATE_KEY)

        assert TEST_PRIVATE_KEY not in repr(network)
        assert '<set>' in repr(network)


# Run tests
if __name__ == "__main__":
    pytest.main([__file__, '-v'])

"""
Tests for network presets and transaction constants.
"""

import dataclasses

import pytest

from starkcall.config import (
    DEFAULT_CONSTANTS,
    NETWORKS,
    Network,
    NetworkConfig,
    TransactionConstants,
    get_network_config,
)
from starkcall.errors import ConfigurationError


class TestNetworkConfig:
    """Tests for presets and lookup."""

    def test_presets(self) -> None:
        assert NETWORKS[Network.MAINNET].chain_id == "SN_MAIN"
        assert NETWORKS[Network.GOERLI].chain_id == "SN_GOERLI"

    def test_get_default(self) -> None:
        assert get_network_config(Network.GOERLI) is NETWORKS[Network.GOERLI]

    def test_rpc_override_copies(self) -> None:
        cfg = get_network_config(Network.GOERLI, "http://localhost:5050")

        assert cfg.rpc_url == "http://localhost:5050"
        assert cfg.chain_id == "SN_GOERLI"
        assert NETWORKS[Network.GOERLI].rpc_url != "http://localhost:5050"

    def test_network_is_str(self) -> None:
        assert Network("mainnet") is Network.MAINNET
        assert Network.GOERLI == "goerli"


class TestFromEnv:
    """Tests for NetworkConfig.from_env."""

    def test_defaults_to_goerli(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STARKCALL_NETWORK", raising=False)
        monkeypatch.delenv("STARKCALL_RPC_URL", raising=False)

        cfg = NetworkConfig.from_env()

        assert cfg == NETWORKS[Network.GOERLI]

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STARKCALL_NETWORK", "MAINNET")
        monkeypatch.setenv("STARKCALL_RPC_URL", "https://node.example.com")

        cfg = NetworkConfig.from_env()

        assert cfg.name is Network.MAINNET
        assert cfg.rpc_url == "https://node.example.com"

    def test_unknown_network(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STARKCALL_NETWORK", "sepolia-ish")

        with pytest.raises(ConfigurationError) as exc_info:
            NetworkConfig.from_env()

        assert exc_info.value.details["allowed"] == ["mainnet", "goerli"]


class TestTransactionConstants:
    """Tests for injected transaction constants."""

    def test_defaults(self) -> None:
        assert DEFAULT_CONSTANTS.transaction_prefix == "invoke"
        assert DEFAULT_CONSTANTS.execute_entry_point == "__execute__"
        assert DEFAULT_CONSTANTS.nonce_entry_point == "get_nonce"
        assert DEFAULT_CONSTANTS.default_max_fee == 0x200000000
        assert DEFAULT_CONSTANTS.default_version == 0
        assert DEFAULT_CONSTANTS.fee_multiplier == 2

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONSTANTS.fee_multiplier = 3

    def test_override(self) -> None:
        custom = TransactionConstants(fee_multiplier=3)

        assert custom.fee_multiplier == 3
        assert custom.default_max_fee == DEFAULT_CONSTANTS.default_max_fee

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .constants import (
    DEFAULT_MAX_FEE,
    DEFAULT_TRANSACTION_VERSION,
    ESTIMATED_FEE_MULTIPLIER,
    EXECUTE_ENTRY_POINT,
    INVOKE_TRANSACTION_PREFIX,
    NONCE_ENTRY_POINT,
)
from .errors import ConfigurationError

__all__ = [
    "Network",
    "NetworkConfig",
    "NETWORKS",
    "get_network_config",
    "TransactionConstants",
    "DEFAULT_CONSTANTS",
]


class Network(str, Enum):
    MAINNET = "mainnet"
    GOERLI = "goerli"


@dataclass
class NetworkConfig:
    name: Network
    chain_id: str
    rpc_url: str

    @classmethod
    def from_env(cls) -> "NetworkConfig":
        """Build a config from ``STARKCALL_NETWORK`` and ``STARKCALL_RPC_URL``.

        Raises:
            ConfigurationError: If ``STARKCALL_NETWORK`` names an unknown network
        """
        raw = os.environ.get("STARKCALL_NETWORK", Network.GOERLI.value)
        try:
            network = Network(raw.lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown network: {raw}",
                details={"allowed": [n.value for n in Network]},
            ) from None
        return get_network_config(network, os.environ.get("STARKCALL_RPC_URL"))


NETWORKS: dict[Network, NetworkConfig] = {
    Network.MAINNET: NetworkConfig(
        name=Network.MAINNET,
        chain_id="SN_MAIN",
        rpc_url="https://starknet-mainnet.public.blastapi.io",
    ),
    Network.GOERLI: NetworkConfig(
        name=Network.GOERLI,
        chain_id="SN_GOERLI",
        rpc_url="https://starknet-testnet.public.blastapi.io",
    ),
}


def get_network_config(network: Network, rpc_url: Optional[str] = None) -> NetworkConfig:
    cfg = NETWORKS[network]
    if rpc_url:
        return replace(cfg, rpc_url=rpc_url)
    return cfg


@dataclass(frozen=True)
class TransactionConstants:
    """Values folded into every invoke transaction.

    Injected into :class:`~starkcall.hashing.TransactionHasher` and
    :class:`~starkcall.account.Account` so tests and alternate networks can
    substitute their own.

    Attributes:
        transaction_prefix: Domain tag hashed first ("invoke")
        execute_entry_point: Account entry point receiving the multicall
        nonce_entry_point: Account view returning the current nonce
        default_max_fee: Max fee used for estimation when none is given
        default_version: Transaction version used when none is given
        fee_multiplier: Factor applied to an estimate before executing
    """

    transaction_prefix: str = INVOKE_TRANSACTION_PREFIX
    execute_entry_point: str = EXECUTE_ENTRY_POINT
    nonce_entry_point: str = NONCE_ENTRY_POINT
    default_max_fee: int = DEFAULT_MAX_FEE
    default_version: int = DEFAULT_TRANSACTION_VERSION
    fee_multiplier: int = ESTIMATED_FEE_MULTIPLIER


DEFAULT_CONSTANTS = TransactionConstants()

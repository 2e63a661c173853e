"""Network definitions for the EVM networks the agent can operate on."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Network:
    """An EVM network, keyed by its CDP network id."""

    network_id: str
    chain_id: int
    rpc_url: str
    native_symbol: str
    explorer_url: str
    is_testnet: bool = False


NETWORKS: dict[str, Network] = {
    "base-sepolia": Network(
        network_id="base-sepolia",
        chain_id=84532,
        rpc_url="https://sepolia.base.org",
        native_symbol="ETH",
        explorer_url="https://sepolia.basescan.org",
        is_testnet=True,
    ),
    "base-mainnet": Network(
        network_id="base-mainnet",
        chain_id=8453,
        rpc_url="https://mainnet.base.org",
        native_symbol="ETH",
        explorer_url="https://basescan.org",
    ),
    "ethereum-sepolia": Network(
        network_id="ethereum-sepolia",
        chain_id=11155111,
        rpc_url="https://ethereum-sepolia-rpc.publicnode.com",
        native_symbol="ETH",
        explorer_url="https://sepolia.etherscan.io",
        is_testnet=True,
    ),
    "ethereum-mainnet": Network(
        network_id="ethereum-mainnet",
        chain_id=1,
        rpc_url="https://eth.llamarpc.com",
        native_symbol="ETH",
        explorer_url="https://etherscan.io",
    ),
    "arbitrum-mainnet": Network(
        network_id="arbitrum-mainnet",
        chain_id=42161,
        rpc_url="https://arb1.arbitrum.io/rpc",
        native_symbol="ETH",
        explorer_url="https://arbiscan.io",
    ),
    "polygon-mainnet": Network(
        network_id="polygon-mainnet",
        chain_id=137,
        rpc_url="https://polygon-rpc.com",
        native_symbol="POL",
        explorer_url="https://polygonscan.com",
    ),
}


def get_network(network_id: str) -> Network:
    """Get a network by id. Raises ``KeyError`` if not found."""
    if network_id not in NETWORKS:
        raise KeyError(
            f"Unknown network '{network_id}'. Available: {list_network_ids()}"
        )
    return NETWORKS[network_id]


def list_network_ids() -> list[str]:
    """Return the ids of all supported networks."""
    return list(NETWORKS.keys())

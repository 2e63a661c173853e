"""Agent wallet: key material, persistence and Web3 access.

The wallet is a single EVM key that the agent uses on the configured
network.  Its exported form is stored in the wallet data file between runs.
"""

from webhook_agent.wallet.keystore import Wallet
from webhook_agent.wallet.networks import NETWORKS, Network, get_network
from webhook_agent.wallet.provider import Web3Provider
from webhook_agent.wallet.store import load_wallet_data, save_wallet_data

__all__ = [
    "NETWORKS",
    "Network",
    "Wallet",
    "Web3Provider",
    "get_network",
    "load_wallet_data",
    "save_wallet_data",
]

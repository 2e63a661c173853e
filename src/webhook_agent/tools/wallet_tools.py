"""Agent-facing wallet tools.

These let the agent inspect its wallet, check its balance, top up from the
CDP faucet on testnets and send native tokens on the configured network.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from web3 import Web3

from webhook_agent.wallet.networks import get_network

if TYPE_CHECKING:
    from webhook_agent.cdp.client import CdpClient
    from webhook_agent.tools.registry import ToolRegistry
    from webhook_agent.wallet.keystore import Wallet
    from webhook_agent.wallet.provider import Web3Provider

logger = logging.getLogger("webhook_agent.tools.wallet")


def register_wallet_tools(
    registry: ToolRegistry,
    wallet: Wallet,
    provider: Web3Provider,
    client: CdpClient,
) -> None:
    """Register the wallet tools, bound to *wallet* and its network."""
    network = get_network(wallet.network_id)

    @registry.tool(
        "get_wallet_details",
        "Get the agent wallet's address and the network it operates on.",
        {"type": "object", "properties": {}, "required": []},
    )
    def get_wallet_details() -> str:
        return (
            f"Wallet address: {wallet.address}\n"
            f"Network: {network.network_id} (chain id {network.chain_id})"
        )

    @registry.tool(
        "get_balance",
        "Get the agent wallet's native token balance on its network.",
        {"type": "object", "properties": {}, "required": []},
    )
    async def get_balance() -> str:
        balance = await asyncio.to_thread(
            provider.get_native_balance, wallet.address, network.network_id
        )
        return f"Balance of {wallet.address} on {network.network_id}: {balance} {network.native_symbol}"

    @registry.tool(
        "request_faucet_funds",
        (
            "Request test funds from the faucet. Only available on testnet "
            "networks such as base-sepolia."
        ),
        {
            "type": "object",
            "properties": {
                "asset_id": {
                    "type": "string",
                    "description": "Asset to request, e.g. 'eth' or 'usdc'. Omit for the native token.",
                },
            },
            "required": [],
        },
    )
    async def request_faucet_funds(asset_id: str = "") -> str:
        if not network.is_testnet:
            return f"Error: the faucet is only available on testnets, not {network.network_id}."
        result = await client.request_faucet_funds(
            network.network_id, wallet.address, asset_id.strip().lower() or None
        )
        tx_link = result.get("transaction_link") or result.get("transaction_hash", "")
        return f"Received {asset_id or network.native_symbol} from the faucet. Transaction: {tx_link}"

    @registry.tool(
        "transfer",
        "Send native tokens from the agent wallet to another address on its network.",
        {
            "type": "object",
            "properties": {
                "to_address": {
                    "type": "string",
                    "description": "Recipient address (0x...)",
                },
                "amount": {
                    "type": "string",
                    "description": "Amount in whole native tokens, e.g. '0.01'",
                },
            },
            "required": ["to_address", "amount"],
        },
    )
    async def transfer(to_address: str, amount: str) -> str:
        if not Web3.is_address(to_address):
            return f"Error: invalid recipient address '{to_address}'."
        try:
            value = Decimal(amount)
        except InvalidOperation:
            return f"Error: invalid amount '{amount}'. Provide a number like '0.01'."
        if value <= 0:
            return "Error: amount must be positive."

        tx_hash = await asyncio.to_thread(
            provider.send_transaction,
            wallet.private_key,
            to_address,
            value,
            network.network_id,
        )
        return (
            f"Transferred {value} {network.native_symbol} to {to_address} on {network.network_id}.\n"
            f"Transaction: {network.explorer_url}/tx/{tx_hash}"
        )

"""Web3 access to the EVM networks in :mod:`webhook_agent.wallet.networks`."""

from __future__ import annotations

import logging
from decimal import Decimal

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from webhook_agent.wallet.networks import get_network

logger = logging.getLogger("webhook_agent.wallet.provider")


class Web3Provider:
    """Caches one Web3 connection per network."""

    def __init__(self, rpc_overrides: dict[str, str] | None = None) -> None:
        self._rpc_overrides = rpc_overrides or {}
        self._instances: dict[str, Web3] = {}

    def get_web3(self, network_id: str) -> Web3:
        """Return a (cached) Web3 instance for the given network.

        Injects POA middleware for everything except Ethereum mainnet.
        """
        if network_id in self._instances:
            return self._instances[network_id]

        network = get_network(network_id)
        rpc_url = self._rpc_overrides.get(network_id, network.rpc_url)
        w3 = Web3(Web3.HTTPProvider(rpc_url))
        if network.chain_id != 1:
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        self._instances[network_id] = w3
        return w3

    def get_native_balance(self, address: str, network_id: str) -> Decimal:
        """Native token balance in whole units (e.g. ETH)."""
        w3 = self.get_web3(network_id)
        balance_wei = w3.eth.get_balance(Web3.to_checksum_address(address))
        return Decimal(str(Web3.from_wei(balance_wei, "ether")))

    def send_transaction(
        self,
        private_key: bytes,
        to_address: str,
        amount_ether: str | Decimal,
        network_id: str,
    ) -> str:
        """Sign and broadcast a native-token transfer; returns the tx hash.

        Uses EIP-1559 fees when the latest block reports a base fee, legacy
        gas pricing otherwise.
        """
        w3 = self.get_web3(network_id)
        network = get_network(network_id)
        from_account = w3.eth.account.from_key(private_key)
        tx: dict = {
            "to": Web3.to_checksum_address(to_address),
            "value": Web3.to_wei(Decimal(str(amount_ether)), "ether"),
            "nonce": w3.eth.get_transaction_count(from_account.address),
            "chainId": network.chain_id,
        }

        base_fee = w3.eth.get_block("latest").get("baseFeePerGas")
        if base_fee is not None:
            max_priority = Web3.to_wei(1.5, "gwei")
            tx["maxFeePerGas"] = base_fee * 2 + max_priority
            tx["maxPriorityFeePerGas"] = max_priority
        else:
            tx["gasPrice"] = w3.eth.gas_price
        tx["gas"] = w3.eth.estimate_gas({**tx, "from": from_account.address})

        signed = w3.eth.account.sign_transaction(tx, private_key)
        tx_hash = w3.eth.send_raw_transaction(signed.raw_transaction)
        logger.info(f"Sent {amount_ether} to {to_address} on {network_id}: {tx_hash.hex()}")
        return tx_hash.hex()

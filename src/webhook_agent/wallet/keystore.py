"""Agent wallet key material, exported as an encrypted eth-account keystore."""

from __future__ import annotations

import json

from eth_account import Account
from eth_account.signers.local import LocalAccount


class Wallet:
    """A single-key EVM wallet bound to one network.

    The exported form is a JSON blob holding the network id and an
    encrypted keystore.  Nothing outside this class looks inside it.
    """

    def __init__(self, account: LocalAccount, network_id: str) -> None:
        self._account = account
        self.network_id = network_id

    @classmethod
    def create(cls, network_id: str) -> Wallet:
        """Generate a new keypair."""
        return cls(Account.create(), network_id)

    @classmethod
    def from_data(cls, data: str, password: str) -> Wallet:
        """Restore a wallet from a blob produced by :meth:`export`.

        Raises
        ------
        ValueError
            If the blob is malformed or the password is incorrect.
        """
        try:
            parsed = json.loads(data)
            keystore = parsed["keystore"]
            network_id = parsed["network_id"]
        except (ValueError, KeyError, TypeError) as exc:
            raise ValueError(f"Malformed wallet data: {exc}") from exc
        try:
            private_key = Account.decrypt(keystore, password)
        except Exception as exc:
            raise ValueError(f"Failed to decrypt wallet data: {exc}") from exc
        return cls(Account.from_key(private_key), network_id)

    @property
    def address(self) -> str:
        """The checksummed wallet address."""
        return self._account.address

    @property
    def private_key(self) -> bytes:
        return bytes(self._account.key)

    def export(self, password: str) -> str:
        """Serialize the wallet with its key encrypted under *password*."""
        keystore = Account.encrypt(self._account.key, password)
        return json.dumps({"network_id": self.network_id, "keystore": keystore})

"""Startup: restore the wallet, wire the tools and build the agent runtime."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from webhook_agent.agent.runtime import ReactAgent
from webhook_agent.cdp.client import CdpClient
from webhook_agent.config import Settings
from webhook_agent.llm.base import BaseLLMProvider
from webhook_agent.llm.openai import OpenAIProvider
from webhook_agent.tools.registry import ToolRegistry
from webhook_agent.tools.wallet_tools import register_wallet_tools
from webhook_agent.tools.webhook_tools import register_webhook_tools
from webhook_agent.wallet.keystore import Wallet
from webhook_agent.wallet.networks import get_network
from webhook_agent.wallet.provider import Web3Provider
from webhook_agent.wallet.store import load_wallet_data, save_wallet_data
from webhook_agent.webhooks.submitter import WebhookSubmitter

logger = logging.getLogger("webhook_agent.bootstrap")


@dataclass
class AgentSession:
    runtime: ReactAgent
    wallet: Wallet
    thread_id: str


def restore_wallet(settings: Settings) -> Wallet:
    """Load the wallet from the data file, or create one if there is none."""
    network_id = settings.effective_network_id
    get_network(network_id)
    if not settings.wallet_password:
        logger.warning("WALLET_PASSWORD not set, wallet data is encrypted with an empty password")

    data = load_wallet_data(settings.wallet_data_file)
    if data is None:
        wallet = Wallet.create(network_id)
        logger.info(f"Created new wallet {wallet.address} on {network_id}")
        return wallet

    wallet = Wallet.from_data(data, settings.wallet_password)
    if wallet.network_id != network_id:
        logger.warning(
            f"Wallet data was saved for {wallet.network_id}, using it on {network_id}"
        )
        wallet.network_id = network_id
    return wallet


def initialize_agent(
    settings: Settings,
    llm_provider: BaseLLMProvider | None = None,
    cdp_client: CdpClient | None = None,
    web3_provider: Web3Provider | None = None,
) -> AgentSession:
    """Build the agent runtime and persist the wallet data once."""
    try:
        wallet = restore_wallet(settings)

        if llm_provider is None:
            llm_provider = OpenAIProvider(
                api_key=settings.llm.api_key,
                model=settings.llm.model,
                base_url=settings.llm.base_url,
                max_tokens=settings.llm.max_tokens,
            )
        if cdp_client is None:
            cdp_client = CdpClient(
                settings.cdp_api_key_name,
                settings.api_key_secret,
                base_url=settings.cdp_api_url,
            )

        registry = ToolRegistry()
        register_wallet_tools(registry, wallet, web3_provider or Web3Provider(), cdp_client)
        register_webhook_tools(registry, WebhookSubmitter(settings, cdp_client))
        runtime = ReactAgent(llm_provider, registry)

        save_wallet_data(settings.wallet_data_file, wallet.export(settings.wallet_password))
    except Exception as exc:
        logger.error(f"Failed to initialize agent: {exc}")
        raise

    logger.info(f"Agent ready with tools: {', '.join(registry.list_names())}")
    return AgentSession(runtime=runtime, wallet=wallet, thread_id=settings.thread_id)

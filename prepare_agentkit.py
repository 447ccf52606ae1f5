from coinbase_agentkit import (
    AgentKit,
    AgentKitConfig,
    cdp_api_action_provider,
    cdp_wallet_action_provider,
)
from coinbase_agentkit.wallet_providers.cdp_wallet_provider import CdpProviderConfig

from config import ChatbotConfig


def prepare_agentkit(config: ChatbotConfig, wallet_provider) -> AgentKit:
    """Register the wallet with the CDP API and CDP wallet action providers."""
    credentials = CdpProviderConfig(
        api_key_name=config.cdp_api_key_name,
        api_key_private_key=config.cdp_api_key_private_key.get_secret_value(),
    )
    return AgentKit(AgentKitConfig(
        wallet_provider=wallet_provider,
        action_providers=[
            cdp_api_action_provider(credentials),
            cdp_wallet_action_provider(credentials),
        ]
    ))

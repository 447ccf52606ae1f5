import json
import os
from typing import Any, Optional, Protocol

from coinbase_agentkit import CdpWalletProvider, CdpWalletProviderConfig

from config import ChatbotConfig
from utils import get_logger

logger = get_logger(__name__)


class ExportableWallet(Protocol):
    def export_wallet(self) -> Any:
        ...


def load_wallet_data(file_path: str) -> Optional[str]:
    """Read a previously persisted wallet snapshot.

    Returns None when the file is missing, empty or unreadable, so startup can
    continue with a fresh wallet.
    """
    if not os.path.exists(file_path):
        logger.info(f"No wallet data found at {file_path}, a new wallet will be created")
        return None
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            wallet_data = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading wallet data: {e}")
        return None
    return wallet_data or None


def save_wallet_data(wallet_provider: ExportableWallet, file_path: str) -> str:
    """Export the wallet and overwrite the snapshot file with it as JSON."""
    wallet_data_json = json.dumps(wallet_provider.export_wallet().to_dict())
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(wallet_data_json)
    logger.info(f"Wallet data saved to {file_path}")
    return wallet_data_json


def create_wallet_provider(config: ChatbotConfig, wallet_data: Optional[str] = None) -> CdpWalletProvider:
    provider_config = CdpWalletProviderConfig(
        api_key_name=config.cdp_api_key_name,
        api_key_private_key=config.cdp_api_key_private_key.get_secret_value(),
        network_id=config.network_id,
        wallet_data=wallet_data,
    )
    wallet_provider = CdpWalletProvider(provider_config)
    logger.info(f"Configured CDP wallet provider on network {config.network_id}")
    return wallet_provider

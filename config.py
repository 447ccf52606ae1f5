import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, SecretStr

from utils import get_logger

load_dotenv()

logger = get_logger(__name__)

REQUIRED_ENV_VARS = ["OPENAI_API_KEY", "CDP_API_KEY_NAME", "CDP_API_KEY_PRIVATE_KEY"]

DEFAULT_NETWORK_ID = "base-sepolia"
DEFAULT_WALLET_DATA_FILE = "wallet_data.txt"
MODEL = "gpt-4o-mini"


class MissingEnvironmentError(EnvironmentError):
    """Raised when one or more required environment variables are unset."""

    def __init__(self, missing_vars: List[str]):
        self.missing_vars = list(missing_vars)
        super().__init__(f"Missing required environment variables: {', '.join(self.missing_vars)}")


class ChatbotConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    openai_api_key: SecretStr
    cdp_api_key_name: str
    cdp_api_key_private_key: SecretStr
    network_id: str = DEFAULT_NETWORK_ID
    wallet_data_file: str = DEFAULT_WALLET_DATA_FILE
    model: str = MODEL


def validate_environment(env: Optional[Mapping[str, str]] = None) -> None:
    """Check required variables, collecting every missing name before raising.

    Warns (without failing) when NETWORK_ID is not set.
    """
    if env is None:
        env = os.environ

    missing_vars = [name for name in REQUIRED_ENV_VARS if not env.get(name)]
    if missing_vars:
        raise MissingEnvironmentError(missing_vars)

    if not env.get("NETWORK_ID"):
        logger.warning(f"NETWORK_ID not set, defaulting to {DEFAULT_NETWORK_ID} testnet")


def load_config(env: Optional[Mapping[str, str]] = None) -> ChatbotConfig:
    if env is None:
        env = os.environ

    validate_environment(env)
    return ChatbotConfig(
        openai_api_key=env["OPENAI_API_KEY"],
        cdp_api_key_name=env["CDP_API_KEY_NAME"],
        cdp_api_key_private_key=env["CDP_API_KEY_PRIVATE_KEY"],
        network_id=env.get("NETWORK_ID") or DEFAULT_NETWORK_ID,
        wallet_data_file=env.get("WALLET_DATA_FILE") or DEFAULT_WALLET_DATA_FILE,
    )

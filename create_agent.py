from typing import Any, Dict, Tuple

from coinbase_agentkit_langchain import get_langchain_tools
from langchain_openai import ChatOpenAI
from langgraph.checkpoint.memory import MemorySaver
from langgraph.prebuilt import create_react_agent

from config import ChatbotConfig
from prepare_agentkit import prepare_agentkit
from utils import get_logger
from wallet_provider import create_wallet_provider, load_wallet_data, save_wallet_data

logger = get_logger(__name__)

THREAD_ID = "CDP AgentKit Chatbot Example!"

AGENT_INSTRUCTIONS = (
    "You are a helpful agent that can interact onchain using the Coinbase Developer Platform AgentKit and "
    "can play a Tic-Tac-Toe Game with an agent."
)


def initialize_agent(config: ChatbotConfig) -> Tuple[Any, Dict[str, Any]]:
    """Initialize the agent with tools from AgentKit.

    Builds the LLM, restores the wallet from the snapshot file (if any), wires
    the CDP action providers into LangChain tools and persists the exported
    wallet before returning the agent and its run configuration.
    """
    try:
        llm = ChatOpenAI(model=config.model, api_key=config.openai_api_key.get_secret_value())

        wallet_data = load_wallet_data(config.wallet_data_file)
        wallet_provider = create_wallet_provider(config, wallet_data)

        agentkit = prepare_agentkit(config, wallet_provider)
        tools = get_langchain_tools(agentkit)

        memory = MemorySaver()
        agent_config = {"configurable": {"thread_id": THREAD_ID}}

        agent = create_react_agent(
            llm,
            tools=tools,
            checkpointer=memory,
            prompt=AGENT_INSTRUCTIONS,
        )

        save_wallet_data(wallet_provider, config.wallet_data_file)
    except Exception as e:
        logger.error(f"Failed to initialize agent: {e}")
        raise

    logger.info(f"Agent created with {len(tools)} tools")
    return agent, agent_config

import sys
from typing import Any, Dict, Iterable, Optional, Protocol, TextIO

from langchain_core.messages import HumanMessage

from config import MissingEnvironmentError, load_config
from create_agent import initialize_agent
from stream_parser import parse_chunk
from utils import get_logger, placeholder_assignment

logger = get_logger(__name__)

INITIAL_PROMPT = "What game can the user play against the agent?"
SEPARATOR = "-------------------"


class ChatAgent(Protocol):
    def stream(self, inputs: Dict[str, Any], config: Dict[str, Any]) -> Iterable[Dict[str, Any]]:
        ...


class ConsoleReader:
    """Line reader over stdin/stdout, released once when its block exits.

    Wrapping the real console goes through input() so the terminal keeps its
    line editing; explicit streams are read line by line.
    """

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        self.input_stream = input_stream
        self.output_stream = output_stream or sys.stdout
        self.closed = False

    def __enter__(self) -> "ConsoleReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def ask(self, prompt: str) -> Optional[str]:
        """Show the prompt and read one line; None once input is closed."""
        if self.closed:
            raise ValueError("I/O operation on closed reader")
        if self.input_stream is None:
            try:
                return input(prompt)
            except EOFError:
                return None

        self.output_stream.write(prompt)
        self.output_stream.flush()
        line = self.input_stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.output_stream.flush()


def stream_response(agent: ChatAgent, config: Dict[str, Any], text: str) -> None:
    """Send one user turn and print every chunk until the stream is drained."""
    for chunk in agent.stream({"messages": [HumanMessage(content=text)]}, config):
        parsed = parse_chunk(chunk)
        if parsed is not None:
            print(parsed.content)
        print(SEPARATOR)


def run_chat_mode(agent: ChatAgent, config: Dict[str, Any], reader: Optional[ConsoleReader] = None) -> None:
    """Run the agent interactively responding to user input."""
    print("Running in chat mode... Type 'exit' to quit")

    with reader or ConsoleReader() as console:
        try:
            print(f"\nPrompt: {INITIAL_PROMPT}")
            stream_response(agent, config, INITIAL_PROMPT)

            while True:
                user_input = console.ask("> ")
                if user_input is None:
                    print()
                    break
                if user_input.lower() == "exit":
                    print("Exiting...")
                    break
                stream_response(agent, config, user_input)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            logger.debug("Chat mode failed", exc_info=True)
            sys.exit(1)


def main() -> None:
    print("Starting chatbot...")
    try:
        config = load_config()
    except MissingEnvironmentError as e:
        print("Error: Required environment variables are not set", file=sys.stderr)
        for var_name in e.missing_vars:
            print(placeholder_assignment(var_name), file=sys.stderr)
        sys.exit(1)

    try:
        print("Initializing agent...")
        agent, agent_config = initialize_agent(config)
        print("Agent initialized successfully.")
    except Exception as e:
        logger.error(f"Detailed error: {e}", exc_info=True)
        sys.exit(1)

    print("Starting chat mode...")
    run_chat_mode(agent, agent_config)


if __name__ == "__main__":
    main()

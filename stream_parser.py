from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class AgentChunk:
    """Model-generated output."""
    content: Any


@dataclass(frozen=True)
class ToolsChunk:
    """Output produced by a tool call."""
    content: Any


StreamChunk = Union[AgentChunk, ToolsChunk]


def _first_content(update: Dict[str, Any]) -> Any:
    return update["messages"][0].content


def parse_chunk(chunk: Dict[str, Any]) -> Optional[StreamChunk]:
    """Decode one streamed graph update into an agent or tools chunk.

    Updates from any other node decode to None.
    """
    if "agent" in chunk:
        return AgentChunk(_first_content(chunk["agent"]))
    elif "tools" in chunk:
        return ToolsChunk(_first_content(chunk["tools"]))
    return None

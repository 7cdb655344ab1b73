"""Tool Interface & Metadata."""

from typing import Any, Protocol

from pydantic import BaseModel


class ToolMetadata(BaseModel):
    """Tool capability metadata."""

    requires_approval: bool = False
    idempotent: bool = False
    capabilities: list[str] = []
    risk_level: str = "low"


class Tool(Protocol):
    """Tool interface."""

    name: str
    description: str
    metadata: ToolMetadata
    input_model: type[BaseModel]

    async def execute(self, ctx: dict, input_data: dict[str, Any]) -> dict[str, Any]:
        """Execute tool action."""
        ...

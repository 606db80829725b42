"""The ``mirror`` tool and its handler."""

from typing import Any, Dict, Optional

import anyio
import anyio.lowlevel
import structlog
from jsonschema_rs import validator_for
from langchain_core.tools import BaseTool, tool
from langchain_core.utils.function_calling import convert_to_openai_function
from pydantic import BaseModel, Field
from structlog.typing import FilteringBoundLogger
from typing_extensions import TypedDict

from text_mirror.config import Settings
from text_mirror.mirror import reverse, scrub_surrogates
from text_mirror.segmentation import grapheme_count

TOOL_NAME = "mirror"
TOOL_DESCRIPTION = "Reverses the given UTF-8 text"


class MirrorInput(BaseModel):
    """Input of the mirror tool."""

    text: str = Field(..., description="UTF-8 text to be mirrored")


class MirrorOutput(BaseModel):
    """Output of the mirror tool."""

    text: str = Field(..., description="Mirrored text")


class ToolDefinition(TypedDict):
    """Used in the response of the list tools request."""

    name: str
    """The name of the tool."""

    description: str
    """A human-readable explanation of the tool's purpose."""

    input_schema: Dict[str, Any]
    """The input schema of the tool. This is a JSON schema."""

    output_schema: Dict[str, Any]
    """The output schema of the tool. This is a JSON schema."""


class ToolException(Exception):
    """An exception that can be raised by a tool."""

    def __init__(
        self,
        *,
        user_message: str = "",
        developer_message: str = "",
    ) -> None:
        """Initializes the tool exception."""
        super().__init__(user_message)
        self.message = user_message
        self.developer_message = developer_message


@tool(TOOL_NAME, args_schema=MirrorInput, description=TOOL_DESCRIPTION)
async def mirror(text: str) -> str:
    """Reverses the given UTF-8 text"""
    return reverse(text)


class MirrorToolHandler:
    """Validates mirror tool calls and runs them.

    Args:
        tool: The tool to run, ``mirror`` unless a test swaps it.
        settings: Settings; debug logging of calls is off by default.
        logger: Where the debug trace of calls goes.
    """

    def __init__(
        self,
        *,
        tool: BaseTool = mirror,
        settings: Optional[Settings] = None,
        logger: Optional[FilteringBoundLogger] = None,
    ) -> None:
        self.tool = tool
        self.settings = settings or Settings()
        self.logger = logger or structlog.getLogger(__name__)
        self.input_schema = convert_to_openai_function(tool)["parameters"]
        self.output_schema = MirrorOutput.model_json_schema()
        self._validator = validator_for(self.input_schema)

    def definition(self) -> ToolDefinition:
        """Describe the tool for the list tools request."""
        return {
            "name": self.tool.name,
            "description": self.tool.description,
            "input_schema": self.input_schema,
            "output_schema": self.output_schema,
        }

    async def call(self, arguments: Optional[Dict[str, Any]]) -> MirrorOutput:
        """Mirror the text in ``arguments``.

        Raises:
            ToolException: if the arguments do not match the input schema.
        """
        args = dict(arguments or {})
        if isinstance(args.get("text"), str):
            args["text"] = scrub_surrogates(args["text"])

        if not self._validator.is_valid(args):
            raise ToolException(
                user_message=f"Invalid payload for tool call to tool {self.tool.name}",
                developer_message=(
                    f"Invalid payload for tool call to tool {self.tool.name} "
                    f"with args {args} and schema {self.input_schema}"
                ),
            )

        # A request cancelled before this point never reaches the engine.
        try:
            await anyio.lowlevel.checkpoint_if_cancelled()
        except anyio.get_cancelled_exc_class():
            self.logger.info("Request canceled", tool=self.tool.name)
            raise

        text = args["text"]
        output_text = await self.tool.ainvoke({"text": text})

        if self.settings.debug_log:
            self.logger.debug(
                "Mirrored text",
                original=text,
                mirrored=output_text,
                clusters=grapheme_count(text),
            )

        return MirrorOutput(text=output_text)

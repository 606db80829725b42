"""MCP client to test talking with the text-mirror server over stdio"""

import asyncio
import sys

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


async def main():
    if len(sys.argv) < 2:
        print("Usage: uv run client.py <text to mirror>")
        sys.exit(1)

    text = " ".join(sys.argv[1:])

    params = StdioServerParameters(command=sys.executable, args=["-m", "text_mirror"])

    async with stdio_client(params) as streams:
        async with ClientSession(streams[0], streams[1]) as session:
            await session.initialize()

            tools = await session.list_tools()
            print(f"Tools: {[tool.name for tool in tools.tools]}")

            result = await session.call_tool("mirror", {"text": text})
            print(f"mirror({text!r}) = {result.content[0].text!r}")


if __name__ == "__main__":
    asyncio.run(main())

# =============================================================================
# agent/csv_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the ADK agent that talks to the user and calls RestCSV tools.
#
#   ┌────────────────────────────┐        ┌─────────────────────────┐
#   │  ADK Agent (LiteLlm model) │ stdio  │  FastMCP server         │ HTTPS
#   │  + system prompt           │───────▶│  (tools/mcp_server.py)  │──────▶ RestCSV
#   └────────────────────────────┘        └─────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the server as a subprocess with the SAME interpreter that runs
#   the agent (sys.executable), so the subprocess sees the same installed
#   packages.  RESTCSV_* variables are forwarded explicitly because the MCP
#   stdio client does not pass the full parent environment through.
#
# MODEL:
#   RESTCSV_AGENT_MODEL picks the LiteLlm model string (default
#   "openrouter/openai/gpt-4o").  LiteLlm reads the provider key
#   (e.g. OPENROUTER_API_KEY) from the environment itself.
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset, StdioConnectionParams
from mcp import StdioServerParameters

from agent.prompt import get_csv_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_environment(environ=None) -> dict[str, str]:
    """Pick the variables the MCP server subprocess needs."""
    env = os.environ if environ is None else environ
    return {key: value for key, value in env.items() if key.startswith("RESTCSV_")}


def create_agent(model: Optional[str] = None) -> Agent:
    """Create the RestCSV assistant.

    Args:
        model: LiteLlm model string.  Falls back to RESTCSV_AGENT_MODEL, then
            DEFAULT_MODEL.
    """
    mcp_tools = MCPToolset(
        connection_params=StdioConnectionParams(
            server_params=StdioServerParameters(
                command=sys.executable,
                args=["-m", "tools.mcp_server"],
                cwd=PROJECT_ROOT,
                env=server_environment(),
            ),
        ),
    )

    model_name = model or os.environ.get("RESTCSV_AGENT_MODEL") or DEFAULT_MODEL

    return Agent(
        name="restcsv_assistant",
        model=LiteLlm(model=model_name),
        instruction=get_csv_assistant_prompt(),
        tools=[mcp_tools],
    )

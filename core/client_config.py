# =============================================================================
# core/client_config.py  -  MCP client configuration snippet
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Finds the environment variables a server source file reads and builds
#   the "mcpServers" block an MCP client (Claude Desktop, Cursor, ...) needs
#   to launch this server.  scripts/show_settings.py prints it.
#
# WHAT COUNTS AS A REFERENCE:
#   os.environ["X"], os.environ.get("X"), os.getenv("X"), and the same
#   calls on a mapping named environ/env (load_settings reads env.get).
#   Only literal names in upper case are picked up.
# =============================================================================

import re
import sys
from typing import Optional

PLACEHOLDER = "<REPLACE>"

_ENV_PATTERN = re.compile(
    r"""(?:\b(?:os\.)?environ|\benv|\bos)"""          # os.environ / environ / env / os
    r"""(?:\.get\(|\.getenv\(|\[)\s*"""               # .get( / .getenv( / [
    r"""["']([A-Z][A-Z0-9_]*)["']"""                  # "NAME"
)


def find_env_variables(source: str) -> list[str]:
    """Return referenced variable names in first-seen order, without duplicates."""
    seen: list[str] = []
    for match in _ENV_PATTERN.finditer(source):
        name = match.group(1)
        if name not in seen:
            seen.append(name)
    return seen


def build_client_config(server_args: list[str], env_vars: list[str],
                        name: str = "restcsv",
                        command: Optional[str] = None) -> dict:
    """Build the mcpServers block for an MCP client config file.

    Args:
        server_args: Arguments for the interpreter, e.g. ["-m", "tools.mcp_server"].
        env_vars: Variable names to list with a placeholder value.
        name: Key the server is registered under.
        command: Executable to run.  Defaults to the current interpreter.
    """
    return {
        "mcpServers": {
            name: {
                "command": command or sys.executable,
                "args": list(server_args),
                "env": {var: PLACEHOLDER for var in env_vars},
            }
        }
    }

# =============================================================================
# scripts/show_settings.py  -  Print an MCP client config snippet
# =============================================================================
#
# HOW TO RUN:
#   python scripts/show_settings.py               # scans core/config.py
#   python scripts/show_settings.py path/to/file.py --name my-restcsv
#
# Scans the given source file for environment variable reads and prints the
# JSON to paste into an MCP client's config.  Development convenience only;
# nothing at runtime depends on it.
# =============================================================================

import argparse
import json
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from core.client_config import build_client_config, find_env_variables  # noqa: E402


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print an MCP client config for the RestCSV server.")
    parser.add_argument("source", nargs="?",
                        default=os.path.join(PROJECT_ROOT, "core", "config.py"),
                        help="Python file to scan for environment variables")
    parser.add_argument("--name", default="restcsv", help="server key in mcpServers")
    args = parser.parse_args(argv)

    with open(args.source, encoding="utf-8") as handle:
        env_vars = find_env_variables(handle.read())

    config = build_client_config(["-m", "tools.mcp_server"], env_vars, name=args.name)
    # The client launches the server from the project root so "-m" resolves.
    config["mcpServers"][args.name]["cwd"] = PROJECT_ROOT

    print("Copy/Paste into your MCP client:")
    print(json.dumps(config, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

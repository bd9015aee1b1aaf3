"""Tests for env var discovery and the show_settings script."""

import importlib.util
import json
import os
import sys

from core.client_config import PLACEHOLDER, build_client_config, find_env_variables

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _load_script():
    path = os.path.join(PROJECT_ROOT, "scripts", "show_settings.py")
    spec = importlib.util.spec_from_file_location("show_settings", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestFindEnvVariables:

    def test_all_access_styles_in_first_seen_order(self):
        source = '''
token = os.environ["B_TOKEN"]
url = os.environ.get("A_URL", "x")
debug = os.getenv('DEBUG')
again = env.get("B_TOKEN")
'''
        assert find_env_variables(source) == ["B_TOKEN", "A_URL", "DEBUG"]

    def test_ignores_non_literal_and_lowercase_names(self):
        assert find_env_variables("os.environ.get(name)\nos.getenv('lower')") == []

    def test_finds_restcsv_settings(self):
        with open(os.path.join(PROJECT_ROOT, "core", "config.py"), encoding="utf-8") as handle:
            names = find_env_variables(handle.read())

        assert names == ["RESTCSV_API_KEY", "RESTCSV_BASE_URL", "RESTCSV_TIMEOUT"]


def test_build_client_config():
    config = build_client_config(["-m", "tools.mcp_server"], ["RESTCSV_API_KEY"],
                                 name="csv", command="python3")

    assert config == {
        "mcpServers": {
            "csv": {
                "command": "python3",
                "args": ["-m", "tools.mcp_server"],
                "env": {"RESTCSV_API_KEY": PLACEHOLDER},
            }
        }
    }


def test_build_client_config_defaults_to_current_interpreter():
    config = build_client_config([], [])
    assert config["mcpServers"]["restcsv"]["command"] == sys.executable


def test_show_settings_prints_snippet(capsys):
    script = _load_script()

    assert script.main([]) == 0

    out = capsys.readouterr().out
    header, _, payload = out.partition("\n")
    assert header == "Copy/Paste into your MCP client:"
    server = json.loads(payload)["mcpServers"]["restcsv"]
    assert server["args"] == ["-m", "tools.mcp_server"]
    assert server["cwd"] == PROJECT_ROOT
    assert server["env"]["RESTCSV_API_KEY"] == PLACEHOLDER


def test_show_settings_scans_given_file(tmp_path, capsys):
    source = tmp_path / "server.py"
    source.write_text('KEY = os.getenv("OTHER_KEY")\n', encoding="utf-8")

    _load_script().main([str(source), "--name", "other"])

    payload = capsys.readouterr().out.partition("\n")[2]
    assert json.loads(payload)["mcpServers"]["other"]["env"] == {"OTHER_KEY": PLACEHOLDER}

"""Register the tracker as an MCP server in AI coding tools."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

from dagtrack.errors import InvalidArgumentError

TT_SERVER_NAME = "tt"
_FALLBACK_EXECUTABLE = "/path/to/tt"


class InstallTool(str, Enum):
    """AI coding tools the tracker can be installed into."""

    CLAUDE = "claude"
    KILO = "kilo"
    KIMI = "kimi"

    def __str__(self) -> str:
        return self.value


def _string_map(value: Any, what: str) -> dict[str, str]:
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ValueError(f"{what} must be an object of strings")
    return dict(value)


@dataclass
class StdioServer:
    """A server started as a local command speaking over stdio."""

    command: str = ""
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"command": self.command, "args": list(self.args), "env": dict(self.env)}

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> StdioServer:
        command = data.get("command", "")
        if not isinstance(command, str):
            raise ValueError("command must be a string")
        args = data.get("args", [])
        if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
            raise ValueError("args must be a list of strings")
        env = _string_map(data.get("env", {}), "env")
        return cls(command=command, args=list(args), env=env)


@dataclass
class HttpServer:
    """A server reached over HTTP."""

    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "headers": dict(self.headers)}

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> HttpServer:
        url = data.get("url", "")
        if not isinstance(url, str):
            raise ValueError("url must be a string")
        headers = _string_map(data.get("headers", {}), "headers")
        return cls(url=url, headers=headers)


McpServer = Union[StdioServer, HttpServer]


def _parse_server(data: Any) -> McpServer:
    if not isinstance(data, dict):
        raise ValueError("server entry must be an object")
    parsers = (
        (HttpServer._from_dict, StdioServer._from_dict)
        if "url" in data and "command" not in data
        else (StdioServer._from_dict, HttpServer._from_dict)
    )
    last_error: ValueError | None = None
    for parse in parsers:
        try:
            return parse(data)
        except ValueError as exc:
            last_error = exc
    raise ValueError(f"invalid server entry: {last_error}")


@dataclass
class McpConfig:
    """The ``mcpServers`` section of an MCP configuration file."""

    mcp_servers: dict[str, McpServer] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mcpServers": {name: server.to_dict() for name, server in self.mcp_servers.items()}
        }

    @classmethod
    def from_dict(cls, data: Any) -> McpConfig:
        """Build a configuration from parsed JSON; raises ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError("configuration must be an object")
        servers = data.get("mcpServers", {})
        if not isinstance(servers, dict):
            raise ValueError("mcpServers must be an object")
        return cls({name: _parse_server(entry) for name, entry in servers.items()})

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class ToolInfo:
    """How a tool is named, where it keeps its config, and its CLI add command."""

    name: str
    config_path: str
    cli_add: str


_TOOL_INFO = {
    InstallTool.CLAUDE: ToolInfo(
        "Claude Code",
        "~/.claude.json or .mcp.json",
        "claude mcp add --transport stdio tt -- <path-to-tt> mcp",
    ),
    InstallTool.KILO: ToolInfo(
        "Kilo CLI",
        "~/.kilocode/cli/global/settings/mcp_settings.json or .kilocode/mcp.json",
        "N/A (edit config file manually)",
    ),
    InstallTool.KIMI: ToolInfo(
        "Kimi CLI",
        "~/.kimi/mcp.json or .mcp.json",
        "kimi mcp add --transport stdio tt -- <path-to-tt> mcp",
    ),
}

_GLOBAL_PATHS = {
    InstallTool.CLAUDE: ".claude.json",
    InstallTool.KILO: ".kilocode/cli/global/settings/mcp_settings.json",
    InstallTool.KIMI: ".kimi/mcp.json",
}

_LOCAL_PATHS = {
    InstallTool.CLAUDE: ".mcp.json",
    InstallTool.KILO: ".kilocode/mcp.json",
    InstallTool.KIMI: ".mcp.json",
}


def tool_info(tool: InstallTool | str) -> ToolInfo:
    """Display name, config location and CLI command for a tool."""
    return _TOOL_INFO[InstallTool(tool)]


def _current_executable() -> str:
    if sys.argv and sys.argv[0]:
        candidate = Path(sys.argv[0])
        if candidate.exists():
            return str(candidate.resolve())
    return _FALLBACK_EXECUTABLE


def _tt_server(executable: str) -> StdioServer:
    return StdioServer(command=executable, args=["mcp"], env={})


def config_example(executable: str | None = None) -> McpConfig:
    """A configuration holding only the tracker's server entry."""
    command = executable if executable is not None else _current_executable()
    return McpConfig({TT_SERVER_NAME: _tt_server(command)})


def config_path_for(
    tool: InstallTool | str, global_scope: bool, home: str | Path | None = None
) -> Path:
    """Config file for a tool: under the home directory if global, else local."""
    tool = InstallTool(tool)
    if not global_scope:
        return Path(_LOCAL_PATHS[tool])
    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            raise FileNotFoundError("Cannot find home directory") from None
    return Path(home) / _GLOBAL_PATHS[tool]


def install_to_config(
    config_path: str | Path,
    tool_name: str,
    global_scope: bool,
    executable: str | None = None,
) -> McpConfig:
    """Add the tracker's server to a config file and return the written config.

    An unreadable or malformed existing config is replaced. For a local
    install the config file name is added to ``.gitignore``.
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config = McpConfig()
    if config_path.exists():
        content = config_path.read_text(encoding="utf-8")
        try:
            config = McpConfig.from_dict(json.loads(content))
        except ValueError:
            config = McpConfig()

    command = executable if executable is not None else _current_executable()
    config.mcp_servers[TT_SERVER_NAME] = _tt_server(command)
    config_path.write_text(config.to_json(), encoding="utf-8")

    print(f"Installed tt as MCP server in {tool_name}")
    print(f"  Config: {config_path}")

    if not global_scope:
        update_gitignore(config_path)
    return config


def update_gitignore(
    config_path: str | Path, gitignore_path: str | Path = ".gitignore"
) -> bool:
    """Add the config file's name to a gitignore file; return whether it was added."""
    gitignore_path = Path(gitignore_path)
    filename = Path(config_path).name

    if not gitignore_path.exists():
        gitignore_path.write_text(f"{filename}\n", encoding="utf-8")
        print(f"  Added {filename} to .gitignore")
        return True

    content = gitignore_path.read_text(encoding="utf-8")
    if any(line.strip() == filename for line in content.splitlines()):
        return False

    gitignore_path.write_text(f"{content.rstrip()}\n{filename}", encoding="utf-8")
    print(f"  Added {filename} to .gitignore")
    return True


def _print_generic_info() -> None:
    print("tt can be installed as an MCP server in various AI coding tools.")
    print()
    print("Supported tools: claude, kilo, kimi")
    print()
    print("Usage:")
    print("  tt install --tool claude           # Show how to install for Claude Code")
    print("  tt install --tool claude --global  # Install globally for Claude Code")
    print("  tt install --tool claude --local   # Install locally for Claude Code")
    print()
    print("Run 'tt install --tool <tool>' to see installation instructions for a specific tool.")


def _print_tool_info(tool: InstallTool) -> None:
    info = tool_info(tool)
    print(f"Installing tt as MCP server for {info.name}")
    print()
    print(f"Config file location: {info.config_path}")
    print()
    print("To add via CLI (if available):")
    print(f"  {info.cli_add}")
    print()
    print("Or add manually to your config file:")
    print(config_example().to_json())


def run(
    tool: InstallTool | str | None,
    global_scope: bool = False,
    local_scope: bool = False,
) -> None:
    """Show installation help, or install when a scope is given."""
    if tool is None:
        _print_generic_info()
        return
    tool = InstallTool(tool)
    if not (global_scope or local_scope):
        _print_tool_info(tool)
        return
    if global_scope and local_scope:
        raise InvalidArgumentError("Cannot specify both --global and --local")
    install_to_config(
        config_path_for(tool, global_scope), tool_info(tool).name, global_scope
    )
"""MCP server exposing agent YAML over STDIO and HTTP transports."""

from pathlib import Path
from typing import Dict, List, Literal, Optional

from mcp.server.fastmcp import FastMCP

from agent_yaml_extractor.loader import find_agent, find_agent_files, load_agent_file
from agent_yaml_extractor.utils.logging import get_logger

logger = get_logger(__name__)


def list_agent_names(directories: List[str]) -> List[str]:
    """List agent names (file stems) found in directories."""
    return [Path(file_path).stem for file_path in find_agent_files(directories)]


def lookup_agent_yaml(
    directories: List[str],
    name: str,
    clean_commands: bool = False,
) -> Dict[str, Optional[str]]:
    """Look up an agent by name and extract its YAML.

    Args:
        directories: Directories containing agent files
        name: Agent name (file stem)
        clean_commands: Whether to remove command descriptions

    Returns:
        Dictionary with the agent name, file path and YAML content,
        or an error message if the agent does not exist
    """
    file_path = find_agent(directories, name)
    if file_path is None:
        return {"error": f"Agent '{name}' not found"}

    agent = load_agent_file(file_path, clean_commands=clean_commands)
    return {"name": agent.name, "file_path": agent.file_path, "yaml": agent.yaml_content}


def run_server(
    directories: List[str],
    clean_commands: bool = False,
    transport: Literal["stdio", "streamable-http"] = "stdio",
    host: str = "127.0.0.1",
    port: int = 8765,
    path: str = "/mcp",
) -> None:
    """Run MCP server with specified transport.

    Args:
        directories: Directories containing agent files
        clean_commands: Whether to remove command descriptions from returned YAML
        transport: Transport protocol to use (default: "stdio")
        host: Host to bind to for HTTP transport (default: "127.0.0.1")
        port: Port to bind to for HTTP transport (default: 8765)
        path: Path for streamable-http transport (default: "/mcp")
    """
    logger.info(f"Starting MCP server for agent directories: {', '.join(directories)}")
    logger.info(f"Clean commands: {clean_commands}")
    logger.info(f"Using transport: {transport}")

    if transport == "streamable-http":
        logger.info(f"HTTP server will be available at: {host}:{port}")
        logger.info(f"Streamable HTTP endpoint: {path}")
        mcp = FastMCP(name="agent-yaml-extractor", host=host, port=port, streamable_http_path=path)
    else:
        mcp = FastMCP(name="agent-yaml-extractor")

    @mcp.tool(name="list_agents", description="List available agents")
    def list_agents() -> Dict[str, List[str]]:
        """List available agents."""
        logger.info("MCP list_agents request")
        return {"agents": list_agent_names(directories)}

    @mcp.tool(name="get_agent_yaml", description="Get the YAML configuration of an agent")
    def get_agent_yaml(name: str) -> Dict[str, Optional[str]]:
        """Get the YAML configuration of an agent.

        Args:
            name: Agent name

        Returns:
            Dictionary with the agent's YAML content
        """
        logger.info(f"MCP get_agent_yaml request: {name}")
        return lookup_agent_yaml(directories, name, clean_commands=clean_commands)

    if transport == "stdio":
        logger.info("Starting MCP stdio server")
        mcp.run(transport="stdio")
    elif transport == "streamable-http":
        logger.info(f"Starting MCP streamable-http server on {host}:{port}{path}")
        mcp.run(transport="streamable-http")

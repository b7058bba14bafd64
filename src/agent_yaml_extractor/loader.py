"""Agent file discovery and loading."""

import concurrent.futures
import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional

from agent_yaml_extractor.utils.logging import get_logger
from agent_yaml_extractor.utils.yaml_extract import extract_yaml_from_agent

logger = get_logger(__name__)


@dataclass
class AgentYaml:
    """YAML extracted from a single agent file."""

    file_path: str
    name: str
    yaml_content: Optional[str]

    @property
    def found(self) -> bool:
        return self.yaml_content is not None


def load_agent_file(file_path: str, clean_commands: bool = False) -> AgentYaml:
    """Read an agent file and extract its YAML block.

    Args:
        file_path: Path to the agent Markdown file
        clean_commands: Whether to remove command descriptions

    Returns:
        AgentYaml for the file (yaml_content is None if no block was found)
    """
    with open(file_path, "r", encoding="utf-8") as f:
        content = f.read()

    return AgentYaml(
        file_path=file_path,
        name=Path(file_path).stem,
        yaml_content=extract_yaml_from_agent(content, clean_commands=clean_commands),
    )


def find_agent_files(directories: List[str], file_extension: str = ".md") -> List[str]:
    """Find all agent files in directories.

    Args:
        directories: Directories to search recursively
        file_extension: File extension to filter

    Returns:
        Sorted list of file paths
    """
    agent_files = []
    for directory in directories:
        for root, _, files in os.walk(directory):
            for file in files:
                if file.endswith(file_extension):
                    agent_files.append(os.path.join(root, file))

    return sorted(agent_files)


def find_agent(directories: List[str], name: str, file_extension: str = ".md") -> Optional[str]:
    """Find the agent file whose name (file stem) matches."""
    for file_path in find_agent_files(directories, file_extension=file_extension):
        if Path(file_path).stem == name:
            return file_path
    return None


def load_agent_directories(
    directories: List[str],
    clean_commands: bool = False,
    workers: int = 1,
    file_extension: str = ".md",
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> List[AgentYaml]:
    """Load YAML from every agent file in directories.

    Args:
        directories: Directories to search recursively
        clean_commands: Whether to remove command descriptions
        workers: Number of worker processes
        file_extension: File extension to filter
        progress_callback: Optional callback called with (completed, total)

    Returns:
        List of AgentYaml objects sorted by file path
    """
    logger.info(f"Scanning directories: {', '.join(directories)}")

    agent_files = find_agent_files(directories, file_extension=file_extension)
    total_files = len(agent_files)
    if progress_callback:
        progress_callback(0, total_files)

    load = partial(load_agent_file, clean_commands=clean_commands)

    agents = []
    if workers <= 1:
        for i, file_path in enumerate(agent_files):
            agents.append(load(file_path))
            if progress_callback:
                progress_callback(i + 1, total_files)
    else:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(load, file_path): file_path for file_path in agent_files}

            for i, future in enumerate(concurrent.futures.as_completed(futures)):
                agents.append(future.result())
                if progress_callback:
                    progress_callback(i + 1, total_files)

    for agent in agents:
        if not agent.found:
            logger.warning(f"No YAML block found in {agent.file_path}")

    logger.info(f"Loaded {len(agents)} agent files")

    return sorted(agents, key=lambda agent: agent.file_path)

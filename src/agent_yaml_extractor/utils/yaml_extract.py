"""YAML block extraction utilities for agent files."""

import re
from typing import Optional

# Fenced code block: ```yaml or ```yml
CODE_BLOCK_PATTERN = re.compile(r"```ya?ml\n([\s\S]*?)\n```")

# Front matter: must start at the very beginning of the document
FRONT_MATTER_PATTERN = re.compile(r"---\n([\s\S]*?)\n---")

# "- "command" - description" -> "- "command"", one line at a time
COMMAND_DESCRIPTION_PATTERN = re.compile(
    r'^([^\S\n]*-)([^\S\n]*"[^"\n]+")([^\S\n]*-.*)$', re.MULTILINE
)


def clean_command_descriptions(yaml_content: str) -> str:
    """Strip trailing descriptions from quoted list-item commands.

    Args:
        yaml_content: YAML text

    Returns:
        YAML text with ``- "cmd" - description`` lines rewritten to ``- "cmd"``
    """
    return COMMAND_DESCRIPTION_PATTERN.sub(r"\1\2", yaml_content)


def extract_yaml_from_agent(agent_content: str, clean_commands: bool = False) -> Optional[str]:
    """Extract YAML content from an agent Markdown document.

    A fenced ```yaml (or ```yml) block is preferred. If none is present,
    front matter delimited by ``---`` lines at the start of the document is used.

    Args:
        agent_content: Full content of the agent file
        clean_commands: Whether to remove command descriptions

    Returns:
        Extracted YAML content, or None if no YAML block was found
    """
    content = agent_content.replace("\r", "")

    match = CODE_BLOCK_PATTERN.search(content)
    if not match:
        match = FRONT_MATTER_PATTERN.match(content)

    if not match:
        return None

    yaml_content = match.group(1).strip()

    if clean_commands:
        yaml_content = clean_command_descriptions(yaml_content)

    return yaml_content

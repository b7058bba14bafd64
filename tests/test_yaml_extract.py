"""Tests for YAML block extraction."""

import pytest

from agent_yaml_extractor.utils.yaml_extract import (
    clean_command_descriptions,
    extract_yaml_from_agent,
)


def test_extract_fenced_yaml_block():
    """Test extracting a ```yaml block."""
    content = """# Dev Agent

Some introduction.

```yaml
agent:
  name: dev
```

More text.
"""
    assert extract_yaml_from_agent(content) == "agent:\n  name: dev"


def test_extract_fenced_yml_block():
    """Test extracting a ```yml block."""
    content = "Intro\n```yml\nname: bot\n```\n"
    assert extract_yaml_from_agent(content) == "name: bot"


def test_fence_language_is_case_sensitive():
    """Test that ```YAML is not recognized as a YAML block."""
    assert extract_yaml_from_agent("```YAML\nname: bot\n```\n") is None


def test_extract_first_fenced_block_only():
    """Test that the shortest span up to the first closing fence is captured."""
    content = "```yaml\nfirst: 1\n```\n\n```yaml\nsecond: 2\n```\n"
    assert extract_yaml_from_agent(content) == "first: 1"


def test_extract_front_matter():
    """Test extracting YAML front matter."""
    content = """---
name: bot
description: Test agent
---

# Bot
"""
    assert extract_yaml_from_agent(content) == "name: bot\ndescription: Test agent"


def test_front_matter_must_start_document():
    """Test that front matter not at position 0 is ignored."""
    content = "# Title\n---\nname: bot\n---\n"
    assert extract_yaml_from_agent(content) is None


def test_fenced_block_takes_precedence_over_front_matter():
    """Test that a fenced block wins over front matter."""
    content = """---
source: front-matter
---

```yaml
source: fenced
```
"""
    assert extract_yaml_from_agent(content) == "source: fenced"


def test_no_yaml_block_returns_none():
    """Test that documents without a YAML block return None."""
    assert extract_yaml_from_agent("# Just Markdown\n\nNo YAML here.\n") is None
    assert extract_yaml_from_agent("") is None


def test_carriage_returns_are_ignored():
    """Test that Windows line endings behave like Unix ones."""
    assert extract_yaml_from_agent("---\r\nfoo\r\n---") == extract_yaml_from_agent("---\nfoo\n---")
    assert extract_yaml_from_agent("---\r\nfoo\r\n---") == "foo"
    assert extract_yaml_from_agent("```yaml\r\nname: bot\r\n```\r\n") == "name: bot"


def test_surrounding_whitespace_is_trimmed():
    """Test that the extracted content is trimmed."""
    content = "```yaml\n\n   name: bot  \n\n```"
    assert extract_yaml_from_agent(content) == "name: bot"


@pytest.mark.parametrize(
    "content",
    [
        "```yaml\n\n```",
        "---\n\n---",
        "---\n   \n---",
    ],
)
def test_empty_block_returns_empty_string(content):
    """Test that an empty block is found but empty."""
    assert extract_yaml_from_agent(content) == ""


def test_malformed_yaml_is_returned_as_is():
    """Test that the content is not parsed."""
    content = "```yaml\nkey: [unclosed\n  : :\n```"
    assert extract_yaml_from_agent(content) == "key: [unclosed\n  : :"


def test_extraction_is_not_reapplicable():
    """Test that extracting from extracted content returns None."""
    content = "# Agent\n```yaml\nname: bot\n```\n"
    extracted = extract_yaml_from_agent(content)
    assert extracted == "name: bot"
    assert extract_yaml_from_agent(extracted) is None


def test_clean_commands_example():
    """Test the full extraction with command cleaning."""
    content = '# Agent\n```yaml\nname: bot\ncommands:\n  - "run" - executes\n```\n'
    assert extract_yaml_from_agent(content, clean_commands=True) == 'name: bot\ncommands:\n  - "run"'


def test_commands_kept_without_clean_commands():
    """Test that descriptions are kept by default."""
    content = '```yaml\ncommands:\n  - "run" - executes\n```'
    assert extract_yaml_from_agent(content) == 'commands:\n  - "run" - executes'


def test_clean_command_descriptions():
    """Test the command cleaning transform line by line."""
    assert clean_command_descriptions('- "build" - runs the build') == '- "build"'
    assert clean_command_descriptions('- "deploy"') == '- "deploy"'
    assert clean_command_descriptions("- build - runs the build") == "- build - runs the build"
    assert clean_command_descriptions('  -   "lint"   -   checks style') == '  -   "lint"'


def test_clean_command_descriptions_multiple_lines():
    """Test that each line is cleaned independently."""
    content = """commands:
  - "help" - show help
  - "deploy"
  - "exit" - leave the agent
  - plain - not quoted
description: "Quoted" - not a list item"""
    expected = """commands:
  - "help"
  - "deploy"
  - "exit"
  - plain - not quoted
description: "Quoted" - not a list item"""
    assert clean_command_descriptions(content) == expected


def test_clean_command_descriptions_leaves_embedded_quotes():
    """Test that quoted values with escaped quotes are left unchanged."""
    line = '- "say \\"hi\\"" - greets'
    assert clean_command_descriptions(line) == line

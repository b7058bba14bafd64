"""Extract embedded YAML blocks from agent Markdown documents."""

from agent_yaml_extractor.utils.yaml_extract import extract_yaml_from_agent

__version__ = "0.1.0"

__all__ = ["extract_yaml_from_agent", "__version__"]

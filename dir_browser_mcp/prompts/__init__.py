"""Aggregates the prompts served by the Directory Browser MCP."""

from .system import get_prompts as get_system_prompts


def get_all_prompts() -> dict[str, str]:
    """
    Returns a dictionary of all available prompts from all prompt files.
    """
    prompts = {}
    prompts.update(get_system_prompts())
    return prompts

"""Prompt text for the agent client.

A packaged prompt can be replaced without reinstalling: a file with the same
name under ./prompts/ in the working directory wins.
"""

from functools import lru_cache
from importlib import resources
from pathlib import Path

LOCAL_PROMPTS_DIR = Path("prompts")


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Text of the prompt called `name`, preferring a local override.

    Raises:
        FileNotFoundError: If neither ./prompts/ nor the package has it
    """
    filename = f"{name}.txt"

    override = Path.cwd() / LOCAL_PROMPTS_DIR / filename
    if override.is_file():
        return override.read_text(encoding="utf-8")

    packaged = resources.files(__name__).joinpath(filename)
    if packaged.is_file():
        return packaged.read_text(encoding="utf-8")

    raise FileNotFoundError(f"No prompt named {name!r} in {override.parent} or in {__name__}")


def get_system_prompt() -> str:
    """Instructions describing the UI tree format and component vocabulary."""
    return load_prompt("system")


def clear_cache() -> None:
    load_prompt.cache_clear()


__all__ = [
    "clear_cache",
    "get_system_prompt",
    "load_prompt",
]

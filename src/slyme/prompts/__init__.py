"""Advisor prompt texts.

``system.txt`` is the persona sent with every call and ``greeting.txt`` is the
first transcript entry. A ``prompts/`` directory in the working directory
takes precedence over the packaged files.
"""

from functools import lru_cache
from pathlib import Path

_PACKAGE_DIR = Path(__file__).parent


@lru_cache(maxsize=4)
def load_prompt(name: str) -> str:
    """Return the stripped text of ``<name>.txt``.

    Raises:
        FileNotFoundError: If neither ./prompts nor the package has the file
    """
    candidates = (
        Path.cwd() / "prompts" / f"{name}.txt",
        _PACKAGE_DIR / f"{name}.txt",
    )
    for path in candidates:
        if path.is_file():
            return path.read_text(encoding="utf-8").strip()

    searched = ", ".join(str(path) for path in candidates)
    raise FileNotFoundError(f"Prompt '{name}' not found (searched {searched})")


def get_system_prompt() -> str:
    return load_prompt("system")


def get_greeting() -> str:
    return load_prompt("greeting")


def clear_cache() -> None:
    load_prompt.cache_clear()


__all__ = [
    "load_prompt",
    "get_system_prompt",
    "get_greeting",
    "clear_cache",
]

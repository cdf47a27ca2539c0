"""Provider factory functions for CLI.

Centralizes creation of the LLM provider and session settings from
environment variables. Hides configuration details from command
implementations.
"""

import os
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from ..llm import LLMProvider, create_llm_provider

# Default console for output
_console = Console()

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"


def get_llm(console: Console | None = None) -> LLMProvider:
    """Create the Gemini provider from environment variables.

    A missing key is only a warning: the provider is still built and every
    call fails, which the chat turns into its apology reply.

    Args:
        console: Optional Rich console for output

    Returns:
        Gemini LLM provider instance

    Environment variables:
        GEMINI_API_KEY: Gemini API key
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
    """
    con = console or _console
    api_key = os.getenv("GEMINI_API_KEY", "")
    if not api_key:
        con.print("[yellow]Warning: GEMINI_API_KEY not set, requests will fail[/yellow]")
    model = os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
    return create_llm_provider("gemini", api_key=api_key, model=model)


def get_request_timeout(console: Console | None = None) -> float | None:
    """Read the optional request timeout in seconds.

    Environment variables:
        SLYME_REQUEST_TIMEOUT: Positive number of seconds (unset: no timeout)
    """
    con = console or _console
    raw = os.getenv("SLYME_REQUEST_TIMEOUT")
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        con.print(f"[yellow]Warning: invalid SLYME_REQUEST_TIMEOUT '{escape(raw)}', ignoring[/yellow]")
        return None
    if timeout <= 0:
        con.print("[yellow]Warning: SLYME_REQUEST_TIMEOUT must be positive, ignoring[/yellow]")
        return None
    return timeout


def console_debug_callback(
    console: Console | None = None,
    verbose: bool = False,
) -> Callable[[str, str, str], None]:
    """Build a debug callback that prints diagnostics to the console.

    Only warnings and errors are shown unless verbose is set.
    """
    con = console or _console
    colors = {"debug": "dim", "info": "cyan", "warning": "yellow", "error": "red"}

    def callback(level: str, component: str, message: str) -> None:
        if not verbose and level not in ("warning", "error"):
            return
        color = colors.get(level, "white")
        con.print(f"[{color}]\\[{component}] {escape(message)}[/{color}]")

    return callback

"""Main CLI application using Typer."""
import asyncio
import os

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from ..chat import ChatSession, Message, Role
from .providers import DEFAULT_GEMINI_MODEL, console_debug_callback, get_llm, get_request_timeout

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="slyme",
    help="Slyme 2.0, a college advisor chat backed by Google Gemini",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _timeout_option(value: float | None) -> float | None:
    """Prefer the command-line timeout, fall back to the environment."""
    if value is not None:
        if value <= 0:
            raise typer.BadParameter("timeout must be positive")
        return value
    return get_request_timeout(console)


def render_message(msg: Message) -> None:
    """Print one transcript entry; assistant content is rendered as markdown."""
    if msg.role == Role.ASSISTANT:
        console.print(Panel(
            Markdown(msg.content),
            title="[bold magenta]Slyme[/bold magenta]",
            title_align="left",
            subtitle=f"[dim]{msg.timestamp}[/dim]" if msg.timestamp else None,
            subtitle_align="right",
            border_style="dim",
        ))
    else:
        stamp = f" [dim]{msg.timestamp}[/dim]" if msg.timestamp else ""
        console.print(f"[bold yellow]You:[/bold yellow]{stamp}")
        console.print(msg.content, markup=False, highlight=False)


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Seconds before a request counts as failed (default: wait indefinitely)"
    ),
):
    """Launch the interactive TUI chat interface."""
    request_timeout = _timeout_option(timeout)

    async def _tui():
        from ..ui import run_textual_tui

        llm = get_llm(console)
        try:
            session = ChatSession(llm, request_timeout=request_timeout)
            await run_textual_tui(session, model_name=llm.model, log_level=log_level)
        finally:
            await llm.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def chat(
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Seconds before a request counts as failed (default: wait indefinitely)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show diagnostic messages for every request"
    ),
):
    """Interactive console chat with the advisor."""
    request_timeout = _timeout_option(timeout)

    async def _chat():
        async with get_llm(console) as llm:
            session = ChatSession(llm, request_timeout=request_timeout)
            session.set_debug_callback(console_debug_callback(console, verbose))

            console.print("[bold cyan]College Advisor: Slyme 2.0[/bold cyan]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            session.start()
            render_message(session.messages[0])

            while True:
                try:
                    user_input = console.input("[bold yellow]>[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in ("exit", "quit", "q"):
                    console.print("[dim]Goodbye![/dim]")
                    break

                seen = len(session.messages)
                session.set_draft(user_input)
                with console.status("[dim]Slyme is typing...[/dim]"):
                    accepted = await session.submit()

                if accepted:
                    for msg in session.messages[seen:]:
                        render_message(msg)

    asyncio.run(_chat())


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question for the advisor"),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Seconds before a request counts as failed (default: wait indefinitely)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show diagnostic messages for the request"
    ),
):
    """Ask a single question and print the advisor's reply."""
    request_timeout = _timeout_option(timeout)

    async def _ask():
        async with get_llm(console) as llm:
            session = ChatSession(llm, request_timeout=request_timeout)
            session.set_debug_callback(console_debug_callback(console, verbose))
            session.start()

            with console.status("[dim]Slyme is typing...[/dim]"):
                accepted = await session.submit(question)

            if not accepted:
                console.print("[red]Error: question is empty[/red]")
                raise typer.Exit(code=1)

            render_message(session.messages[-1])

    asyncio.run(_ask())


@app.command()
def health():
    """Check that the Gemini credential is configured."""
    model = os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
    console.print(f"[dim]Model: {model}[/dim]")

    if os.getenv("GEMINI_API_KEY"):
        console.print("[green]+[/green] Gemini API key: SET")
    else:
        console.print("[red]x[/red] Gemini API key: NOT SET")
        raise typer.Exit(code=1)

    timeout = get_request_timeout(console)
    console.print(f"[dim]Request timeout: {f'{timeout:g}s' if timeout else 'none'}[/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

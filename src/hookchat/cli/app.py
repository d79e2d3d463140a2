"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.text import Text

from ..chat import ChatController
from ..conversation import ConversationStore, Message, Sender
from .providers import get_endpoint_url, get_log_level, get_webhook_client, require_endpoint_url

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="hookchat",
    help="Chat with an automation webhook from the terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


def _print_reply(reply: Message, store: ConversationStore) -> None:
    if reply.sender is Sender.ASSISTANT:
        console.print("[bold green]Assistant:[/bold green] ", end="")
        console.print(Text(reply.text))
    else:
        console.print(Text(reply.text, style="red"))
        if store.state.error:
            console.print(Text(store.state.error, style="dim"))


@app.command(name="tui")
def tui_command(
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        help="Webhook URL (default: HOOKCHAT_WEBHOOK_URL)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel at level: debug, info, warning, error"
    )
):
    """Launch the chat widget (TUI)."""
    async def _tui():
        from ..ui import run_textual_tui

        endpoint = get_endpoint_url(url)
        client = get_webhook_client(endpoint)
        await run_textual_tui(
            client=client,
            endpoint_url=endpoint,
            log_level=get_log_level(log_level),
        )

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def chat(
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        help="Webhook URL (default: HOOKCHAT_WEBHOOK_URL)"
    )
):
    """Interactive line-mode chat with the webhook."""
    endpoint = require_endpoint_url(url, console)

    async def _chat():
        store = ConversationStore(endpoint_url=endpoint, welcome_message=None)
        async with get_webhook_client(endpoint) as client:
            controller = ChatController(store, client)

            console.print("[bold cyan]hookchat[/bold cyan]")
            console.print(f"[dim]Session {store.session_id}[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if not user_input.strip():
                    continue

                if user_input.strip().lower() in ('exit', 'quit', 'q'):
                    console.print("[dim]Goodbye![/dim]")
                    break

                with console.status("[dim]Waiting for reply...[/dim]"):
                    reply = await controller.send(user_input)
                if reply is not None:
                    _print_reply(reply, store)
                console.print()

    asyncio.run(_chat())


@app.command()
def send(
    text: str = typer.Argument(..., help="Message to send"),
    url: str | None = typer.Option(
        None,
        "--url",
        "-u",
        help="Webhook URL (default: HOOKCHAT_WEBHOOK_URL)"
    ),
    session_id: str | None = typer.Option(
        None,
        "--session-id",
        "-s",
        help="Session token to reuse (default: a new one)"
    )
):
    """Send one message and print the reply."""
    endpoint = require_endpoint_url(url, console)
    if not text.strip():
        console.print("[red]Error: message is empty[/red]")
        raise typer.Exit(code=1)

    async def _send() -> bool:
        store = ConversationStore(
            endpoint_url=endpoint, session_id=session_id, welcome_message=None
        )
        async with get_webhook_client(endpoint) as client:
            reply = await ChatController(store, client).send(text)
        _print_reply(reply, store)
        return reply.sender is Sender.ASSISTANT

    if not asyncio.run(_send()):
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

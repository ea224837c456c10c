#!/usr/bin/env python3
"""
Portfolio Assistant - CLI Entry Point

Chat with the portfolio assistant in the terminal, inspect the context
selected for a question, or run the completion relay.

Usage:
    python portfolio_chat.py chat
    python portfolio_chat.py chat --in-process
    python portfolio_chat.py context "Tell me about your healthcare AI projects"
    python portfolio_chat.py serve --port 8000
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
import httpx

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from chatbot.chat.client import RelayClient
from chatbot.chat.context_builder import build_context
from chatbot.chat.engine import ChatEngine
from chatbot.session import ChatSession
from config import Config, set_config
from knowledge.profile_loader import load_knowledge_base
from report.console_reporter import ACTION_COMMANDS, ConsoleReporter

IN_PROCESS_ENDPOINT = "http://relay/api/chat"


async def run_chat(session: ChatSession, reporter: ConsoleReporter) -> None:
    """Read visitor messages until exit and print the replies."""
    reporter.print_reply(session.welcome())

    while True:
        try:
            message = reporter.console.input("[bold green]You:[/bold green] ")
        except (EOFError, KeyboardInterrupt):
            break

        command = message.strip().lower()
        if command in ("exit", "quit"):
            break

        if command in ACTION_COMMANDS:
            reply = await session.run_action(ACTION_COMMANDS[command])
        else:
            reply = await session.send(message)

        if reply:
            reporter.print_reply(reply)


@click.group()
@click.option(
    "--knowledge-base",
    "-k",
    type=click.Path(),
    envvar="KNOWLEDGE_BASE_PATH",
    help="Path to the knowledge base JSON file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Verbose output",
)
@click.pass_context
def cli(ctx: click.Context, knowledge_base: Optional[str], verbose: bool) -> None:
    """Portfolio assistant command line tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config()
    if knowledge_base:
        config.knowledge_base_path = Path(knowledge_base)
    set_config(config)
    ctx.obj = config


@cli.command()
@click.option(
    "--relay-url",
    envvar="CHAT_RELAY_URL",
    help="URL of the relay chat endpoint. Default: http://localhost:8000/api/chat",
)
@click.option(
    "--in-process",
    is_flag=True,
    help="Call the relay app directly instead of over the network",
)
@click.pass_obj
def chat(config: Config, relay_url: Optional[str], in_process: bool) -> None:
    """
    Start an interactive chat session.

    Examples:

        python portfolio_chat.py chat

        python portfolio_chat.py chat --relay-url https://example.com/api/chat

        python portfolio_chat.py chat --in-process  # needs ANTHROPIC_API_KEY
    """
    if relay_url:
        config.relay_url = relay_url

    transport = None
    endpoint = config.relay_url
    if in_process:
        from api.main import app

        transport = httpx.ASGITransport(app=app)
        endpoint = IN_PROCESS_ENDPOINT

    knowledge_base = load_knowledge_base(config=config)
    client = RelayClient(endpoint, timeout=config.request_timeout, transport=transport)
    engine = ChatEngine(knowledge_base, client=client, config=config)
    session = ChatSession(engine, config=config)

    reporter = ConsoleReporter()
    reporter.print_header(
        knowledge_base.personal_info.name,
        "in-process relay" if in_process else endpoint,
    )
    asyncio.run(run_chat(session, reporter))


@cli.command()
@click.argument("query")
@click.pass_obj
def context(config: Config, query: str) -> None:
    """
    Show the knowledge base context selected for QUERY.

    Example:

        python portfolio_chat.py context "What skills do you have?"
    """
    knowledge_base = load_knowledge_base(config=config)
    ConsoleReporter().print_context(query, build_context(query, knowledge_base))


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address. Default: 127.0.0.1")
@click.option("--port", default=8000, type=int, help="Port. Default: 8000")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the completion relay with uvicorn."""
    import uvicorn

    uvicorn.run("api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()

"""Console rendering of chat replies with Rich formatting."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from chatbot.chat.actions import ACTION_LABELS, QuickAction
from chatbot.models.schemas import ChatReply

# Slash commands understood by the interactive chat
ACTION_COMMANDS = {
    "/demo": QuickAction.TRY_MODEL_DEMO,
    "/resume": QuickAction.DOWNLOAD_RESUME,
    "/call": QuickAction.SCHEDULE_CALL,
    "/projects": QuickAction.SEE_ALL_PROJECTS,
}


class ConsoleReporter:
    """Render assistant output in the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_header(self, name: str, relay: str) -> None:
        """Print the chat banner."""
        title = f"{escape(name)} - Portfolio Assistant\n[dim]{escape(relay)}[/dim]"
        self.console.print()
        self.console.print(Panel(title, style="bold blue"))
        self.console.print("[dim]Type 'exit' to leave. Quick actions: "
                           + ", ".join(ACTION_COMMANDS) + "[/dim]")
        self.console.print()

    def print_reply(self, reply: ChatReply) -> None:
        """Print an assistant reply and any quick actions offered with it."""
        if reply.rejected:
            self.console.print(Text(f"! {reply.content}", style="yellow"))
            self.console.print()
            return

        self.console.print(Panel(Markdown(reply.content), title="Assistant", title_align="left"))

        if reply.quick_actions:
            self._print_actions(reply.quick_actions)
        self.console.print()

    def _print_actions(self, actions: list[QuickAction]) -> None:
        """Print quick actions with the command that triggers each."""
        commands = {action: command for command, action in ACTION_COMMANDS.items()}

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Command", style="cyan")
        table.add_column("Action")

        for action in actions:
            table.add_row(commands[action], ACTION_LABELS[action])

        self.console.print(table)

    def print_context(self, query: str, context: str) -> None:
        """Print the context block built for a query."""
        self.console.print(
            Panel(Text(context), title=Text(f"Context for: {query}"), title_align="left")
        )

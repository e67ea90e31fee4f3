"""Base command classes for the contacts CLI."""

from abc import ABC, abstractmethod
from cli.core.context import Context
from cli.core.utils import EXIT_ERROR


class BaseCommand(ABC):
    """Base class for all commands."""

    def __init__(self, ctx: Context):
        self.ctx = ctx
        self.session = ctx.session
        self.console = ctx.console

    @abstractmethod
    def execute(self, **kwargs) -> int:
        """Execute command. Returns exit code."""
        pass

    def handle_exception(self, e: Exception) -> int:
        """Common error handling."""
        self.ctx.stderr_console.print(f"❌ Error: {e}", style="bold red")
        if self.ctx.verbose:
            import traceback
            self.console.print(traceback.format_exc(), style="dim")
        return EXIT_ERROR


class BaseCountryCommand(BaseCommand):
    """Base for country commands."""

    @property
    def service(self):
        from contacts.services import CountriesService
        return CountriesService(self.session)


class BasePersonCommand(BaseCommand):
    """Base for person commands."""

    @property
    def service(self):
        from contacts.services import PersonsService
        return PersonsService(self.session)

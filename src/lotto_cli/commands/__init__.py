# Area: Commands
"""CLI subcommands, keyed by their command-line name."""

from .status import StatusCommand
from .show_config import ShowConfigCommand
from .setup_wizard import SetupWizard

COMMANDS = {
    StatusCommand.name: StatusCommand,
    ShowConfigCommand.name: ShowConfigCommand,
    SetupWizard.name: SetupWizard,
}

__all__ = [
    "StatusCommand",
    "ShowConfigCommand",
    "SetupWizard",
    "COMMANDS",
]

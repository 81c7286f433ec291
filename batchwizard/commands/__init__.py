"""Commands - step tables that drive the wizard engine."""

from .base import CreateFilesCommand
from .command_palette import CreateFromCommandPaletteCommand
from .context_menu import CreateFromMenuCommand

__all__ = [
    'CreateFilesCommand',
    'CreateFromCommandPaletteCommand',
    'CreateFromMenuCommand',
]

"""Interactive choice between chat and autonomous mode."""

from __future__ import annotations

from enum import Enum

from rich.console import Console


class Mode(str, Enum):
    CHAT = "chat"
    AUTO = "auto"


_CHOICES = {
    "1": Mode.CHAT,
    "chat": Mode.CHAT,
    "2": Mode.AUTO,
    "auto": Mode.AUTO,
}


def choose_mode(console: Console) -> Mode:
    """Prompt until the user picks a mode by number or name."""
    while True:
        console.print("\nAvailable modes:")
        console.print("1. chat    - Interactive chat mode")
        console.print("2. auto    - Autonomous action mode")

        choice = console.input("\nChoose a mode (enter number or name): ").strip().lower()
        mode = _CHOICES.get(choice)
        if mode is not None:
            return mode
        console.print("Invalid choice. Please try again.")

"""tools/protologic

Command lines for the Protologic simulator and replay player.
"""

from __future__ import annotations

from .runner import player_command, simulator_command

__all__ = ["player_command", "simulator_command"]

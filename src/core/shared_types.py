"""
Type definitions used across layers
"""

from enum import StrEnum

# --- The domain (src/latrones/) has its own Side and Phase enums. These are the names the outside world sees.


class PlayerColor(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class GamePhase(StrEnum):
    PLACEMENT = "placement"
    MOVEMENT = "movement"

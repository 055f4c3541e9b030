"""
Type definitions used across layers
"""

from enum import StrEnum


class SessionStatus(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    GAVE_UP = "gave up"
    CHEATED = "cheated"

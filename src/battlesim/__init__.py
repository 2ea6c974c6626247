"""Turn-based two-combatant battle simulator."""

__version__ = "0.1.0"

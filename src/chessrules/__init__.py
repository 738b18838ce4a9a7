"""Move-legality and terminal-state engine for standard chess pieces."""

__version__ = "0.1.0"

"""Command line and HTTP entry points for hand ranking."""

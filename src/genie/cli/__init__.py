"""Command line entry points for GenieAI."""

"""NATURALATTACKS token parsing for LST game data."""

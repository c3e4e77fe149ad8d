"""User interface frontends for cellular automata."""

from .cli import CLIGameOfLife

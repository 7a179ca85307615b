"""Shell building blocks: environment lists, a lexer, a line reader, a pipe runner, printf and signal messaging."""

__version__ = "0.1.0"
"""Adapters: command-line entry points and user interfaces."""

__all__: list[str] = []

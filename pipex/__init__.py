"""Locate and split pipeline commands, with string, character, memory and list helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "text", "transform", "linked", "commands"]
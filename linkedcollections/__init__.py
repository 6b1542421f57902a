"""Linked-list stack and queue, with interactive console menus in the cli module."""

__version__ = "0.1.0"
__all__ = ["stack", "fifo", "cli"]
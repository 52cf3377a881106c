"""Bridges between the engine and host UIs."""

from .host import FORWARDED_EVENTS, EditorAdapter, HostHooks

__all__ = ["EditorAdapter", "HostHooks", "FORWARDED_EVENTS"]

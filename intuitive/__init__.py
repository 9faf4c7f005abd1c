"""Declarative component trees, widget builders, input events and animations for terminal UIs, with sample screens."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "component",
    "events",
    "widgets",
    "file_manager",
    "sysmon",
    "basic_demos",
    "interactive_demos",
]
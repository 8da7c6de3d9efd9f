# src/taskline/__init__.py

"""taskline: a line-oriented task tracker (todos, deadlines, events)."""

__version__ = "0.1.0"

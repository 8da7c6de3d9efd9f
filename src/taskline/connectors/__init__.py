# src/taskline/connectors/__init__.py

# src/taskline/core/__init__.py

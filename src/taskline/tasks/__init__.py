# src/taskline/tasks/__init__.py

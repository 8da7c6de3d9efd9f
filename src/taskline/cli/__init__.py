# src/taskline/cli/__init__.py

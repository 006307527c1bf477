"""Best-fit font sizing.

Subpackages:
- `core` — settings and structured logging
- `typeset` — fit search, Pillow measurement, label entry points
Modules:
- `cli` — `fontfit` command line tool
"""

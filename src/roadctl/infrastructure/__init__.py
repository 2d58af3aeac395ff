"""Infrastructure layer — text tables, state file, and workspace wiring.

The workspace bridges the domain registry and the files on disk.
"""

"""Command layer — Click entry point and the interactive menu controller."""

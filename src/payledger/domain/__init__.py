"""Domain layer — employee records, pay rules, and input validation.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""

"""Infrastructure layer — in-process record storage.

This layer depends on stdlib only and imports domain types for
annotations alone.  The service layer bridges between domain models and
infrastructure.
"""

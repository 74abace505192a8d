"""Products API Package: HTTP CRUD service for the products catalog.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "0.1.0"

"""Core Layer: error hierarchy and storage contracts, no IO.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
"""

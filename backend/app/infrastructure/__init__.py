"""Infrastructure Layer: storage backends and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All backend faults mapped to StorageFailureError (core/errors.py)
"""

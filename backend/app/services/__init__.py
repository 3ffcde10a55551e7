"""Services Layer: workflows that compose core rules with repositories.

Invariants:
    - Services depend on repository Protocols, never on a concrete backend
"""

"""Employee Registry: validated employee records over a JSON REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

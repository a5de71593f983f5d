"""Infra Kata Application Package — greeting API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

"""Infrastructure Layer — clock access and logging setup.

Invariants:
    - Only infrastructure/ touches process-level resources (system clock, root logger)
"""

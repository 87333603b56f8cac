"""Infrastructure Layer — the stateful shell around the pure core.

Invariants:
    - Infrastructure owns all mutable state and all logging
    - Matching decisions are delegated to core/
"""

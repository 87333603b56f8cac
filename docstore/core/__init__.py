"""Core Layer — pure domain logic, no IO, no logging, no state.

Invariants:
    - No module in core/ imports from infrastructure/ or config
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the store owns the map,
      core decides which documents match
"""

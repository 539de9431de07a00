"""Core Layer — pure domain logic: envelopes, outcomes, input parsing.

Invariants:
    - Core never performs IO and never imports from infrastructure/ or api/
    - Store access happens only through repository_protocols

Design Decisions:
    - Impureim sandwich: services/ orchestrates IO around these pure functions
"""

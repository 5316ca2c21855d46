"""Core — pure domain logic (durations, field selection, linked data, errors).

Invariants:
    - Core never performs IO and never imports from api/ or infrastructure/
"""

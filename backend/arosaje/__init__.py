"""Arosaje Application Package — plant guardianship API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

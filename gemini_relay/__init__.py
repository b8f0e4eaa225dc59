"""Gemini Relay Package — browser-facing relay to the Gemini generateContent API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

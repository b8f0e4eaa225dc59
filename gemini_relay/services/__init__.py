"""Services Layer — composes core decisions with the upstream client.

Invariants:
    - Services return Ok/Err results for expected outcomes
    - Only unexpected failures escape as exceptions
"""

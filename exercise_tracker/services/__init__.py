"""Services Layer — user and exercise persistence behind the route handlers.

Invariants:
    - Services own all store access; routes never build queries
    - Business rejections raised as core.errors types, never returned as values
"""

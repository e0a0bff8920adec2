"""Services - the blog and credential stores plus their process-wide registry.

Invariants:
    - Stores receive their document collection by injection
    - Each store owns exactly one guard
"""

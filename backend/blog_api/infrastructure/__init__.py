"""Infrastructure Layer - storage backends and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - Storage exceptions are mapped to core errors before leaving this layer
"""

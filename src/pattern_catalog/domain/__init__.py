"""
Domain Layer - Pattern Implementations

This layer contains the entities and domain services behind the decorator,
observer, builder and facade examples. It has no dependency on configuration
or presentation concerns.
"""

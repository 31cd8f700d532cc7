"""Domain layer package.

The domain layer contains pure business logic with zero external dependencies.
It includes entities, value objects, the transfer resolver, and domain exceptions.
"""

__all__ = []

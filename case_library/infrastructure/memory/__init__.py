from .in_memory_repositories import InMemoryCaseRepository, InMemoryAdminRepository

__all__ = [
    "InMemoryCaseRepository",
    "InMemoryAdminRepository",
]

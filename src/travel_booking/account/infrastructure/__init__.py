from .in_memory_user_repository import (
    InMemoryUserRepository as InMemoryUserRepository,
)

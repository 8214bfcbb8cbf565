"""In-memory adapters for the article store."""

from articat.infrastructure.memory.audit_log import InMemoryAuditLog
from articat.infrastructure.memory.di import MemoryProvider
from articat.infrastructure.memory.id_allocator import CounterIdAllocator
from articat.infrastructure.memory.repository import InMemoryArticleRepository
from articat.infrastructure.memory.uow import InMemoryUnitOfWork

__all__ = [
    "CounterIdAllocator",
    "InMemoryArticleRepository",
    "InMemoryAuditLog",
    "InMemoryUnitOfWork",
    "MemoryProvider",
]

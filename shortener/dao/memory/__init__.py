from shortener.dao.memory.allocator import CodeAllocator
from shortener.dao.memory.entry_memory_dao import EntryMemoryDAO
from shortener.dao.memory.mixins import MemoryStoreMixin


__all__ = [
    'CodeAllocator',
    'EntryMemoryDAO',
    'MemoryStoreMixin',
]

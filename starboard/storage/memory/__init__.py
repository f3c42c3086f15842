"""
In-memory configuration sources.
"""

from starboard.storage.memory.sources import InMemoryConfigSource, InMemoryStore

__all__ = ["InMemoryConfigSource", "InMemoryStore"]

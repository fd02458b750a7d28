from kinmesh.memorial_store.base import MemorialStore
from kinmesh.memorial_store.local import LocalMemorialStore

__all__ = ["LocalMemorialStore", "MemorialStore"]

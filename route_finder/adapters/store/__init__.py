"""Store adapters - Implementations of LocationStorePort.

Available implementations:
- InMemoryLocationStore: Thread-safe dict-backed store
- CSVLocationStore: Persists locations and routes to CSV files
"""

from .csv_store import CSVLocationStore
from .memory_store import InMemoryLocationStore

__all__ = ["CSVLocationStore", "InMemoryLocationStore"]

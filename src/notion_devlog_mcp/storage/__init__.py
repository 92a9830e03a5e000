"""Storage abstractions for the Notion dev logger."""

from .notion import CreatedRecord, NotionStore, NotionStoreError

__all__ = ["CreatedRecord", "NotionStore", "NotionStoreError"]

"""Storage configuration objects for Coursebook.

Instead of wiring stores by hand, pass a storage configuration that knows
how to build them:
- LocalStorage: SQLite files in a data directory
- FirebaseStorage: Cloud Firestore collections

Example:
    from coursebook import Coursebook, LocalStorage

    book = Coursebook(storage=LocalStorage("./coursebook_data"))
"""

from coursebook.configuration.base import StorageConfig
from coursebook.configuration.storage import FirebaseStorage, LocalStorage

__all__ = ["FirebaseStorage", "LocalStorage", "StorageConfig"]

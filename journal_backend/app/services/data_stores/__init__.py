# journal_backend/app/services/data_stores/__init__.py
"""
Unified export surface for data store helpers.

Import from here in routers, e.g.:
    from journal_backend.app.services.data_stores import (
        # Records
        REVIEWS, INVENTORY, WISHLIST, RecordNotFound, store_for,
        # Media
        save_upload, MediaError,
    )
"""

from __future__ import annotations

# ---- Journal records (review / inventory / wishlist) ----
from .records import (  # noqa: F401
    RecordStore,
    RecordNotFound,
    REVIEWS,
    INVENTORY,
    WISHLIST,
    store_for,
    purchase_wishlist_item,
)

# ---- Photo uploads ----
from .media import (  # noqa: F401
    MEDIA_URL_PREFIX,
    MediaError,
    save_upload,
    delete_media,
)

__all__ = [
    "RecordStore", "RecordNotFound", "REVIEWS", "INVENTORY", "WISHLIST",
    "store_for", "purchase_wishlist_item",
    "MEDIA_URL_PREFIX", "MediaError", "save_upload", "delete_media",
]

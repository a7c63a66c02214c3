"""
History service for ComponentCraft: versioned component history and collections
"""
from typing import Optional, List, Dict, Any, Callable
from collections import Counter
from datetime import datetime
import logging
import uuid

from pydantic import ValidationError

from config.settings import HISTORY_MAX_SIZE, HISTORY_STORAGE_KEY, COLLECTIONS_STORAGE_KEY
from models.history import (
    Collection,
    ExportDocument,
    HistoryEntry,
    HistoryStatistics,
    TagCount,
    entry_metadata_adapter,
)
from services.code_utils import (
    categorize_component,
    detect_component_type,
    extract_component_name,
    generate_tags,
    normalize_code,
)
from services.storage import KeyValueStore

logger = logging.getLogger(__name__)


class HistoryService:
    """
    Deduplicating, versioned repository of generated components.

    Every mutation is written through to the key-value store. Access is not
    locked; a single logical caller is assumed.
    """

    def __init__(
        self,
        store: KeyValueStore,
        max_size: int = HISTORY_MAX_SIZE,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.max_size = max_size
        self._clock = clock
        self._entries: Dict[str, HistoryEntry] = {}
        self._collections: Dict[str, Collection] = {}

    # --- Lifecycle ---

    def open(self) -> None:
        self.store.open()
        self._load()

    def close(self) -> None:
        self.store.close()

    def _load(self) -> None:
        try:
            raw_entries = self.store.get(HISTORY_STORAGE_KEY) or []
            raw_collections = self.store.get(COLLECTIONS_STORAGE_KEY) or []
            entries = [HistoryEntry.model_validate(item) for item in raw_entries]
            collections = [Collection.model_validate(item) for item in raw_collections]
        except (ValidationError, ValueError, TypeError) as e:
            logger.error(f"Stored component history is unreadable, starting empty: {e}", exc_info=True)
            entries, collections = [], []

        self._entries = {entry.id: entry for entry in entries}
        self._collections = {collection.id: collection for collection in collections}
        logger.info(f"Component history loaded: {len(self._entries)} components, {len(self._collections)} collections")

    def _save(self) -> None:
        try:
            self.store.set(HISTORY_STORAGE_KEY, [entry.to_wire() for entry in self._entries.values()])
            self.store.set(COLLECTIONS_STORAGE_KEY, [collection.to_wire() for collection in self._collections.values()])
        except Exception as e:
            logger.error(f"Failed to save component history: {e}", exc_info=True)

    # --- Entries ---

    def _find_similar(self, code: str) -> Optional[HistoryEntry]:
        """Highest-version entry whose normalized code equals `code`'s."""
        normalized = normalize_code(code)
        similar = [entry for entry in self._entries.values() if normalize_code(entry.code) == normalized]
        if not similar:
            return None
        return max(similar, key=lambda entry: entry.version)

    async def add(self, code: str, prompt: str, metadata: Optional[Dict[str, Any]] = None) -> HistoryEntry:
        """
        Record a generated component. Code equal to an existing entry after
        normalization becomes a new entry with the same name and the next version.
        """
        entry_id = f"comp_{uuid.uuid4().hex[:16]}"
        similar = self._find_similar(code)

        if similar:
            name = similar.name
            version = similar.version + 1
        else:
            name = extract_component_name(code) or f"Component_{entry_id[5:13]}"
            version = 1

        metadata_data = {
            "type": detect_component_type(code),
            "framework": "react",
            "category": categorize_component(prompt),
            "tags": generate_tags(prompt, code),
        }
        metadata_data.update(metadata or {})

        entry = HistoryEntry(
            id=entry_id,
            name=name,
            code=code,
            prompt=prompt,
            timestamp=self._clock(),
            version=version,
            metadata=entry_metadata_adapter.validate_python(metadata_data),
        )

        self._entries[entry.id] = entry
        self._prune_if_needed()
        self._save()

        logger.info(f"Recorded component '{entry.name}' v{entry.version} ({entry.id})")
        return entry

    async def get(self, entry_id: str) -> Optional[HistoryEntry]:
        entry = self._entries.get(entry_id)
        if entry:
            entry.stats.usage_count += 1
            entry.stats.last_used = self._clock()
            self._save()
        return entry

    def list_all(self) -> List[HistoryEntry]:
        """All entries, most recent first; equal timestamps list the newest insert first."""
        return sorted(reversed(list(self._entries.values())), key=lambda entry: entry.timestamp, reverse=True)

    def search(self, query: str) -> List[HistoryEntry]:
        query_lower = query.lower()
        return [
            entry for entry in self.list_all()
            if query_lower in entry.name.lower()
            or query_lower in entry.prompt.lower()
            or any(query_lower in tag.lower() for tag in entry.metadata.tags)
            or query_lower in entry.metadata.category.lower()
        ]

    def by_category(self, category: str) -> List[HistoryEntry]:
        return [entry for entry in self.list_all() if entry.metadata.category == category]

    def favorites(self) -> List[HistoryEntry]:
        return [entry for entry in self.list_all() if entry.stats.favorite]

    async def toggle_favorite(self, entry_id: str) -> Optional[bool]:
        """New favorite state, or None when the entry does not exist."""
        entry = self._entries.get(entry_id)
        if not entry:
            return None
        entry.stats.favorite = not entry.stats.favorite
        self._save()
        return entry.stats.favorite

    async def rate(self, entry_id: str, rating: int) -> Optional[HistoryEntry]:
        if not 1 <= rating <= 5:
            raise ValueError(f"Rating must be between 1 and 5, got {rating}")
        entry = self._entries.get(entry_id)
        if not entry:
            return None
        entry.stats.rating = rating
        self._save()
        return entry

    def _remove(self, entry_id: str) -> bool:
        if self._entries.pop(entry_id, None) is None:
            return False
        now = self._clock()
        for collection in self._collections.values():
            if entry_id in collection.components:
                collection.components = [component for component in collection.components if component != entry_id]
                collection.updated_at = now
        return True

    async def delete(self, entry_id: str) -> bool:
        deleted = self._remove(entry_id)
        if deleted:
            self._save()
            logger.info(f"Deleted component {entry_id}")
        return deleted

    def _prune_if_needed(self) -> None:
        excess = len(self._entries) - self.max_size
        if excess <= 0:
            return

        candidates = sorted(
            (entry for entry in self._entries.values() if not entry.stats.favorite),
            key=lambda entry: entry.timestamp,
        )
        removed = [entry.id for entry in candidates[:excess]]
        for entry_id in removed:
            self._remove(entry_id)

        if len(self._entries) > self.max_size:
            logger.warning(f"History holds {len(self._entries)} entries; favorites exceed the cap of {self.max_size}")
        logger.info(f"Pruned {len(removed)} old components from history")

    async def clear_history(self) -> None:
        self._entries.clear()
        self._collections.clear()
        self._save()
        logger.info("Component history cleared")

    # --- Collections ---

    async def create_collection(
        self,
        name: str,
        description: str = "",
        component_ids: Optional[List[str]] = None,
        tags: Optional[List[str]] = None,
        is_public: bool = False,
    ) -> Collection:
        now = self._clock()
        known_ids = [component_id for component_id in dict.fromkeys(component_ids or []) if component_id in self._entries]
        collection = Collection(
            id=f"coll_{uuid.uuid4().hex[:16]}",
            name=name,
            description=description,
            components=known_ids,
            created_at=now,
            updated_at=now,
            tags=tags or [],
            is_public=is_public,
        )
        self._collections[collection.id] = collection
        self._save()
        logger.info(f"Created collection '{name}' ({collection.id})")
        return collection

    async def add_to_collection(self, collection_id: str, component_id: str) -> bool:
        collection = self._collections.get(collection_id)
        if not collection or component_id not in self._entries or component_id in collection.components:
            return False
        collection.components.append(component_id)
        collection.updated_at = self._clock()
        self._save()
        return True

    async def remove_from_collection(self, collection_id: str, component_id: str) -> bool:
        collection = self._collections.get(collection_id)
        if not collection or component_id not in collection.components:
            return False
        collection.components.remove(component_id)
        collection.updated_at = self._clock()
        self._save()
        return True

    def get_collection(self, collection_id: str) -> Optional[Collection]:
        return self._collections.get(collection_id)

    def list_collections(self) -> List[Collection]:
        return sorted(self._collections.values(), key=lambda collection: collection.updated_at, reverse=True)

    # --- Export / import ---

    def export_entry(self, entry_id: str) -> Optional[str]:
        entry = self._entries.get(entry_id)
        if not entry:
            return None
        document = ExportDocument(
            name=entry.name,
            code=entry.code,
            prompt=entry.prompt,
            metadata=entry.metadata,
            exported_at=self._clock().isoformat(),
        )
        return document.model_dump_json(by_alias=True, indent=2)

    async def import_entry(self, serialized: str) -> Optional[HistoryEntry]:
        """Re-run an exported document through `add`. Malformed input returns None."""
        try:
            document = ExportDocument.model_validate_json(serialized)
        except ValidationError as e:
            logger.error(f"Failed to import component: {e}")
            return None
        return await self.add(document.code, document.prompt, document.metadata.to_wire())

    # --- Statistics ---

    def statistics(self) -> HistoryStatistics:
        entries = self.list_all()
        categories = Counter(entry.metadata.category for entry in entries)
        tags = Counter(tag for entry in entries for tag in entry.metadata.tags)

        ratings = [entry.stats.rating for entry in entries if entry.stats.rating]
        average_rating = round(sum(ratings) / len(ratings), 1) if ratings else 0

        most_used = None
        for entry in entries:
            if most_used is None or entry.stats.usage_count > most_used.stats.usage_count:
                most_used = entry

        return HistoryStatistics(
            total_components=len(entries),
            total_collections=len(self._collections),
            favorite_count=sum(1 for entry in entries if entry.stats.favorite),
            average_rating=average_rating,
            most_used_component=most_used,
            categories_breakdown=dict(categories),
            popular_tags=[TagCount(tag=tag, count=count) for tag, count in tags.most_common(10)],
        )

# backend/pattern_catalog/patterns/registry.py
"""
Catalog - Central store for pattern entries

Owns every entry and keeps the name, category, tag and back-reference
indexes consistent with each other.
"""

import logging
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Set, Tuple

from pattern_catalog.entries import (
    Category,
    DuplicateNameError,
    EntryNotFoundError,
    ErrorKind,
    PatternEntry,
    validate_entry,
)
from pattern_catalog.patterns.locking import ReadWriteLock

logger = logging.getLogger(__name__)


class Violation(NamedTuple):
    """One problem found by Catalog.validate_all()"""
    entry_name: str
    kind: ErrorKind
    detail: str = ""


class ViolationReport:
    """
    Restartable view over the violations of a catalog

    Each iteration snapshots the catalog under the read lock and then
    checks entries one at a time as the caller consumes the results.
    """

    def __init__(self, catalog: "Catalog"):
        self._catalog = catalog

    def __iter__(self) -> Iterator[Violation]:
        entries, names = self._catalog._snapshot()
        return _scan(entries, names)

    def __bool__(self) -> bool:
        return any(True for _ in self)


def _scan(entries: List[PatternEntry], names: Set[str]) -> Iterator[Violation]:
    for entry in entries:
        for error in validate_entry(entry).errors:
            yield Violation(entry.name, error.kind, error.message)

        for ref in sorted(entry.related_patterns):
            if ref not in names:
                yield Violation(
                    entry.name,
                    ErrorKind.DANGLING_REFERENCE,
                    f"related pattern '{ref}' is not in the catalog",
                )


class Catalog:
    """
    Central store for pattern entries

    Entries are kept in insertion order. Mutations take the write side of
    the lock; queries and rendering take the read side.
    """

    def __init__(self, entries: Iterable[PatternEntry] = ()):
        self.lock = ReadWriteLock()
        self._entries: Dict[str, PatternEntry] = {}
        self._category_index: Dict[Category, List[str]] = {cat: [] for cat in Category}
        self._tag_index: Dict[str, List[str]] = {}
        self._referenced_by: Dict[str, Set[str]] = {}

        for entry in entries:
            self.add(entry)

    def add(self, entry: PatternEntry) -> None:
        """Insert an entry. Raises before touching any index if the entry is rejected."""
        validate_entry(entry).raise_on_errors()
        tag_keys = [tag.lower() for tag in entry.tags]

        with self.lock.write_locked():
            if entry.name in self._entries:
                raise DuplicateNameError(f"pattern '{entry.name}' is already in the catalog")

            self._entries[entry.name] = entry
            self._category_index[entry.category].append(entry.name)

            for key in tag_keys:
                self._tag_index.setdefault(key, []).append(entry.name)

            for ref in entry.related_patterns:
                self._referenced_by.setdefault(ref, set()).add(entry.name)

        logger.debug(f"[Catalog] Added '{entry.name}' ({entry.category.value})")

    def remove(self, name: str) -> PatternEntry:
        """
        Remove an entry and return it.

        References that other entries hold to this name are left in place
        and show up as dangling in validate_all().
        """
        with self.lock.write_locked():
            entry = self._entries.pop(name, None)
            if entry is None:
                raise EntryNotFoundError(f"pattern '{name}' is not in the catalog")

            self._category_index[entry.category].remove(name)

            for tag in entry.tags:
                names = self._tag_index.get(tag.lower(), [])
                if name in names:
                    names.remove(name)
                if not names:
                    self._tag_index.pop(tag.lower(), None)

            for ref in entry.related_patterns:
                referrers = self._referenced_by.get(ref)
                if referrers is not None:
                    referrers.discard(name)
                    if not referrers:
                        del self._referenced_by[ref]

        logger.debug(f"[Catalog] Removed '{name}'")
        return entry

    def amend(
        self,
        name: str,
        notes: Iterable[str] = (),
        applicability: Iterable[str] = (),
        known_uses: Iterable[str] = (),
    ) -> PatternEntry:
        """Append-only edit of an entry's free-text lists"""
        with self.lock.write_locked():
            entry = self._entries.get(name)
            if entry is None:
                raise EntryNotFoundError(f"pattern '{name}' is not in the catalog")
            entry.amend(notes=notes, applicability=applicability, known_uses=known_uses)

        logger.debug(f"[Catalog] Amended '{name}'")
        return entry

    def validate_all(self) -> ViolationReport:
        return ViolationReport(self)

    def referenced_by(self, name: str) -> List[str]:
        """Names of entries whose related_patterns mention `name`, in insertion order"""
        with self.lock.read_locked():
            referrers = self._referenced_by.get(name, set())
            return [n for n in self._entries if n in referrers]

    def get(self, name: str) -> Optional[PatternEntry]:
        with self.lock.read_locked():
            return self._entries.get(name)

    def get_by_category(self, category: Category) -> List[PatternEntry]:
        """Entries of one category in insertion order"""
        with self.lock.read_locked():
            return [self._entries[name] for name in self._category_index[category]]

    def get_by_tag(self, tag: str) -> List[PatternEntry]:
        """Entries carrying `tag` (case-insensitive), in insertion order"""
        with self.lock.read_locked():
            wanted = set(self._tag_index.get(tag.lower(), []))
            return [e for name, e in self._entries.items() if name in wanted]

    def list_all(self) -> List[PatternEntry]:
        with self.lock.read_locked():
            return list(self._entries.values())

    def names(self) -> List[str]:
        with self.lock.read_locked():
            return list(self._entries)

    def _snapshot(self) -> Tuple[List[PatternEntry], Set[str]]:
        with self.lock.read_locked():
            return list(self._entries.values()), set(self._entries)

    def __len__(self) -> int:
        with self.lock.read_locked():
            return len(self._entries)

    def __contains__(self, name) -> bool:
        with self.lock.read_locked():
            return name in self._entries

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self.list_all())


# Global catalog instance
_global_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Get or create the process-wide catalog"""
    global _global_catalog
    if _global_catalog is None:
        from pattern_catalog.patterns.catalog import build_catalog
        _global_catalog = build_catalog()
    return _global_catalog


def reset_catalog() -> None:
    """Discard the process-wide catalog; the next get_catalog() rebuilds it"""
    global _global_catalog
    _global_catalog = None

"""Key/value store of contextual information for one logical operation.

Keys are case-insensitive. Nothing in this module raises for bad input:
blank keys are ignored and odd values are converted to text, because a
logging helper must never break the code it is instrumenting.
"""

import threading
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple
from uuid import UUID

from scopelog.utils.validation import is_blank

from .host import read_host_information
from .scope import ScopeSnapshot, TransientScope

NULL_MARKER = "NULL"
EMPTY_MARKER = "EMPTY"


def encode_value(value: Any) -> str:
    """Convert a context value to its canonical text form.

    Args:
        value: Value to record (str, int, UUID, None or anything printable)

    Returns:
        "NULL" for None, "EMPTY" for the nil UUID, decimal text for integers,
        hyphenated lowercase hex for UUIDs, otherwise str(value)
    """
    if value is None:
        return NULL_MARKER
    if isinstance(value, str):
        return value
    if isinstance(value, UUID):
        return EMPTY_MARKER if value.int == 0 else str(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return str(int(value))
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _normalize_key(key: str) -> str:
    return key.strip().casefold()


class ContextStore:
    """Contextual information appended to log messages for one execution flow.

    A store without a parent is seeded with host information read from the
    environment. A store created from a parent starts with a copy of the
    parent's entries and does no seeding of its own.
    """

    def __init__(
        self,
        parent: Optional["ContextStore"] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the store.

        Args:
            parent: Store whose current entries become this store's initial state
            environ: Environment mapping used for host seeding (root stores only);
                defaults to the configured host environment
        """
        self._parent = parent
        self._environ = environ
        # normalized key -> (key as first given, value)
        self._entries: Dict[str, Tuple[str, str]] = {}
        self._lock = threading.RLock()
        # Bumped on every change; lets a flow binding tell when its copy is stale.
        self._version = 0
        self._on_change: Optional[Callable[["ContextStore"], None]] = None

        if parent is not None:
            self.restore(parent.snapshot())
        else:
            self._seed_host_information()

    @property
    def parent(self) -> Optional["ContextStore"]:
        """The store this one was derived from, if any."""
        return self._parent

    def set(self, key: Optional[str], value: Any) -> "ContextStore":
        """Add or replace a piece of contextual information.

        Args:
            key: Case-insensitive key; None, empty or whitespace-only keys are ignored
            value: Value to record; see encode_value() for the text conversion

        Returns:
            This store, for chaining
        """
        if is_blank(key):
            return self

        normalized = _normalize_key(key)
        text = encode_value(value)
        with self._lock:
            existing = self._entries.get(normalized)
            original_key = existing[0] if existing is not None else key
            self._entries[normalized] = (original_key, text)
            self._version += 1
        self._changed()
        return self

    def update(self, values: Mapping[str, Any]) -> "ContextStore":
        """Set several entries at once.

        Args:
            values: Mapping of key to value

        Returns:
            This store, for chaining
        """
        for key, value in values.items():
            self.set(key, value)
        return self

    def unset(self, key: Optional[str]) -> "ContextStore":
        """Remove the entry for a key, if present.

        Args:
            key: Case-insensitive key; None, empty or whitespace-only keys are ignored

        Returns:
            This store, for chaining
        """
        if is_blank(key):
            return self

        with self._lock:
            self._entries.pop(_normalize_key(key), None)
            self._version += 1
        self._changed()
        return self

    def clear_all(self) -> "ContextStore":
        """Remove every entry, then re-seed host information for a root store.

        Returns:
            This store, for chaining
        """
        with self._lock:
            self._entries.clear()
            self._version += 1
            self._seed_host_information()
        self._changed()
        return self

    def get(self, key: Optional[str]) -> Optional[str]:
        """Look up the value recorded against a key.

        Args:
            key: Case-insensitive key

        Returns:
            The recorded value, or None if absent or the key is blank
        """
        if is_blank(key):
            return None

        entry = self._entries.get(_normalize_key(key))
        return entry[1] if entry is not None else None

    def snapshot(self) -> ScopeSnapshot:
        """Take an immutable copy of the current entries, in insertion order."""
        with self._lock:
            return tuple(self._entries.values())

    @property
    def version(self) -> int:
        """Change counter, incremented by every mutation."""
        return self._version

    def versioned_snapshot(self) -> Tuple[int, ScopeSnapshot]:
        """Take a snapshot together with the change counter it corresponds to."""
        with self._lock:
            return self._version, tuple(self._entries.values())

    def restore(self, snapshot: Optional[Iterable[Any]]) -> None:
        """Replace the current entries with those of a snapshot.

        A None snapshot is ignored. Entries that are not (key, value) pairs or
        that have a blank key are skipped.

        Args:
            snapshot: Value previously returned by snapshot()
        """
        if snapshot is None:
            return

        entries: Dict[str, Tuple[str, str]] = {}
        try:
            for pair in snapshot:
                if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                    continue
                key, value = pair
                if is_blank(key):
                    continue
                entries[_normalize_key(key)] = (key, encode_value(value))
        except TypeError:
            # Not iterable; leave the store untouched.
            return

        with self._lock:
            self._entries = entries
            self._version += 1
        self._changed()

    def as_dict(self) -> Dict[str, str]:
        """Get a plain dictionary copy of the entries."""
        return dict(self.snapshot())

    def format(self) -> str:
        """Render the entries as text to append to a log message.

        Returns:
            One "\\r\\n[KEY:value]" block per entry with the key upper-cased,
            or an empty string when the store is empty
        """
        return "".join(f"\r\n[{key.upper()}:{value}]" for key, value in self.snapshot())

    def start_scope(self) -> TransientScope:
        """Start a scope that reverts this store to its current state on release."""
        return TransientScope(self)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    def _seed_host_information(self) -> None:
        if self._parent is not None:
            # Derived stores inherit host information from their parent.
            return

        for key, value in read_host_information(self._environ).items():
            self.set(key, value)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"ContextStore(entries={self.as_dict()!r}, root={self._parent is None})"

"""
Named color lookup.

Two databases are available: ``x11`` (the default) and ``css`` (also reachable
as ``w3c``). A name may select one explicitly with a prefix, e.g.
``"css:gray"``; an unknown prefix is kept as part of the name.

Tables are loaded on first use, once per process, under a lock.
"""
from __future__ import annotations
import re
import threading
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..errors import NamedColorNotFoundError
from .named_tables import build_css_table, build_x11_table
from .rgb import RGB

_PREFIX_RE = re.compile(r"^\s*([a-z0-9]+)\s*:\s*(.*)$", re.IGNORECASE | re.DOTALL)


def normalize_name(name: str) -> str:
    """Lowercase and drop all whitespace: ``"Dark Golden Rod"`` -> ``"darkgoldenrod"``."""
    return re.sub(r"\s+", "", str(name)).lower()


class NamedColorDatabase:
    """A lazily loaded ``name -> RGB`` table."""

    def __init__(self, name: str, loader: Callable[[], Dict[str, int]], aliases: Iterable[str] = ()):
        self.name = name
        self.aliases = tuple(aliases)
        self._loader = loader
        self._colors: Optional[Dict[str, RGB]] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._colors is not None

    def _data(self) -> Dict[str, RGB]:
        colors = self._colors
        if colors is None:
            with self._lock:
                if self._colors is None:
                    self._colors = {
                        key: RGB((v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF)
                        for key, v in self._loader().items()
                    }
                colors = self._colors
        return colors

    def lookup(self, name: str) -> Optional[RGB]:
        return self._data().get(normalize_name(name))

    def names(self) -> List[str]:
        return list(self._data())

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._data()

    def __len__(self):
        return len(self._data())

    def __repr__(self):
        return f"NamedColorDatabase({self.name!r}, loaded={self.loaded})"


X11 = NamedColorDatabase("x11", build_x11_table)
CSS = NamedColorDatabase("css", build_css_table, aliases=("w3c",))

DATABASES: Dict[str, NamedColorDatabase] = {
    key: db for db in (X11, CSS) for key in (db.name, *db.aliases)
}
DEFAULT_DATABASE = X11


def get_database(database: str | NamedColorDatabase | None = None) -> NamedColorDatabase:
    if database is None:
        return DEFAULT_DATABASE
    if isinstance(database, NamedColorDatabase):
        return database
    try:
        return DATABASES[database.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown named color database: {database!r}. Available: {', '.join(DATABASES)}"
        ) from None


def split_prefix(name: str) -> Tuple[NamedColorDatabase, str]:
    """Pick the database selected by a ``x11:``/``css:``/``w3c:`` prefix."""
    match = _PREFIX_RE.match(name)
    if match and match.group(1).lower() in DATABASES:
        return DATABASES[match.group(1).lower()], match.group(2)
    return DEFAULT_DATABASE, name


def lookup(name: str, database: str | NamedColorDatabase | None = None) -> Optional[RGB]:
    """
    Find a named color, or None.

    Without ``database`` a prefix in ``name`` selects one, defaulting to X11.
    """
    if not isinstance(name, str):
        return None
    if database is None:
        db, bare = split_prefix(name)
    else:
        db, bare = get_database(database), name
    return db.lookup(bare)


def parse_named(name: str, database: str | NamedColorDatabase | None = None) -> RGB:
    """Like :func:`lookup` but raises NamedColorNotFoundError."""
    if database is None and isinstance(name, str):
        db, bare = split_prefix(name)
    else:
        db, bare = get_database(database), name
    found = db.lookup(bare) if isinstance(bare, str) else None
    if found is None:
        raise NamedColorNotFoundError(str(bare).strip(), db.name)
    return found


def is_named(name) -> bool:
    return lookup(name) is not None

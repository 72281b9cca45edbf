"""Choose a loader or saver for a file by its extension."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

__all__ = [
    "Loader",
    "Saver",
    "LoaderRegistry",
    "SaverRegistry",
    "extension_of",
]


def extension_of(filename: str) -> Optional[str]:
    """Return the text after the last ``.`` in ``filename``, or None if there is none."""
    head, dot, tail = filename.rpartition(".")
    return tail if dot else None


class Loader(ABC):
    """Reads a file of one format into a scene.

    Subclasses set ``ext`` to the file extension they handle, without the dot.
    """

    ext: str = ""

    @abstractmethod
    def load(self, filename: str, scene: Any) -> bool:
        """Fill ``scene`` from ``filename``; return whether it succeeded."""


class Saver(ABC):
    """Writes a scene to a file of one format.

    Subclasses set ``ext`` to the file extension they handle, without the dot.
    """

    ext: str = ""

    @abstractmethod
    def save(self, filename: str, scene: Any) -> bool:
        """Write ``scene`` to ``filename``; return whether it succeeded."""


def _lookup(registry: Dict[str, Any], filename: Optional[str], kind: str) -> Any:
    if filename is None:
        raise ValueError("no filename given")
    ext = extension_of(filename)
    if ext is None:
        raise ValueError(f"{filename!r} has no extension")
    handler = registry.get(ext)
    if handler is None:
        raise ValueError(f"no {kind} registered for extension {ext!r}")
    return handler


class LoaderRegistry:
    """Maps file extensions to loaders; the first loader registered for one wins."""

    def __init__(self):
        self._loaders: Dict[str, Loader] = {}

    def register(self, loader: Optional[Loader]) -> None:
        """Add ``loader`` under its extension unless one is already registered."""
        if loader is None:
            return
        self._loaders.setdefault(loader.ext, loader)

    def load(self, filename: str, scene: Any) -> bool:
        """Load ``filename`` into ``scene`` with the loader for its extension.

        Raises ValueError when the name has no extension or no loader handles it.
        """
        return _lookup(self._loaders, filename, "loader").load(filename, scene)


class SaverRegistry:
    """Maps file extensions to savers; the first saver registered for one wins."""

    def __init__(self):
        self._savers: Dict[str, Saver] = {}

    def register(self, saver: Optional[Saver]) -> None:
        """Add ``saver`` under its extension unless one is already registered."""
        if saver is None:
            return
        self._savers.setdefault(saver.ext, saver)

    def save(self, filename: str, scene: Any) -> bool:
        """Save ``scene`` to ``filename`` with the saver for its extension.

        Raises ValueError when the name has no extension or no saver handles it.
        """
        return _lookup(self._savers, filename, "saver").save(filename, scene)
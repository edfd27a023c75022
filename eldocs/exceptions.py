"""Exception types raised by the extraction pipeline and the query layer."""

from typing import Iterable


class ElDocsError(Exception):
    """Base class for all eldocs errors."""


class CatalogNotFoundError(ElDocsError, FileNotFoundError):
    """The structured catalog file is missing. Fatal for a run."""


class CatalogFormatError(ElDocsError, ValueError):
    """The catalog file exists but does not have the expected shape."""


class ArtifactWriteError(ElDocsError, OSError):
    """The aggregate component catalog could not be written."""


class ComponentLookupError(ElDocsError, LookupError):
    """A queried tag or field name does not exist."""

    def __init__(self, kind: str, key: str, available: Iterable[str], scope: str = ""):
        self.kind = kind
        self.key = key
        self.available = list(available)
        where = f" in component \"{scope}\"" if scope else ""
        listing = ", ".join(self.available) or "none"
        super().__init__(
            f"{kind.capitalize()} \"{key}\" not found{where}. "
            f"Available {kind}s: {listing}"
        )

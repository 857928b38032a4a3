"""
Spira version information.

Release values are fixed per release; VERSION is built once at import
and never mutated.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


# Release components (rewritten during release)
MAJOR = 0
MINOR = 0
TINY = 13
EXTRA: Optional[str] = None


@dataclass(frozen=True)
class VersionInfo:
    """
    Release identifier.

    The canonical string is "major.minor.patch", with ".extra" appended
    only when extra is a non-empty string. An empty extra is stored as None.
    """
    major: int
    minor: int
    patch: int
    extra: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.extra is not None and not isinstance(self.extra, str):
            raise ValueError(f"extra must be a str or None, got {type(self.extra).__name__}")
        if self.extra == "":
            object.__setattr__(self, "extra", None)

    @property
    def is_prerelease(self) -> bool:
        """
        True when an extra label is present.

        Any label counts, so special-build labels are reported as
        prereleases too.
        """
        return bool(self.extra)

    def to_tuple(self) -> Tuple[int, int, int]:
        """Return (major, minor, patch), without the extra label."""
        return (self.major, self.minor, self.patch)

    def to_string(self) -> str:
        """Return the canonical dotted version string."""
        base = ".".join(str(part) for part in self.to_tuple())
        if self.extra:
            return f"{base}.{self.extra}"
        return base

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "version": self.to_string(),
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "extra": self.extra,
        }

    def __str__(self) -> str:
        return self.to_string()


VERSION = VersionInfo(MAJOR, MINOR, TINY, EXTRA)

__version__ = VERSION.to_string()
__version_info__ = VERSION.to_tuple()

# Version metadata
VERSION_MAJOR = __version_info__[0]
VERSION_MINOR = __version_info__[1]
VERSION_PATCH = __version_info__[2]

# Build info (populated during release)
BUILD_DATE = "development"
GIT_COMMIT = "development"

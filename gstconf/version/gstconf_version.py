from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
import hashlib


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for gstconf.

    Carries major, minor and patch numbers plus a digest of the package
    sources and a release date.
    """
    major: int
    minor: int
    patch: int
    hash: str
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.2.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version, short source digest and release date."""
        return f"{self} (hash: {self.hash_short()}, date: {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    def hash_short(self, length: int = 8) -> str:
        """Return shortened hash (default 8 characters)."""
        return self.hash[:length]

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        """Return formatted date string."""
        return self.date.strftime(fmt)


def _compute_package_hash() -> str:
    """SHA256 over the gstconf Python sources, in sorted path order."""
    package_dir = Path(__file__).resolve().parent.parent
    hasher = hashlib.sha256()

    for source in sorted(package_dir.rglob("*.py")):
        if "__pycache__" in source.parts:
            continue
        hasher.update(source.relative_to(package_dir).as_posix().encode())
        hasher.update(source.read_bytes())

    return hasher.hexdigest()


GSTCONF_VERSION = Version(
    major=0,
    minor=2,
    patch=0,
    hash=_compute_package_hash(),
    date=datetime(2026, 10, 19),
)

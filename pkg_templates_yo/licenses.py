"""License text store.

License texts are plain files named by their short identifier. The default
store reads the texts shipped inside the package.
"""

from __future__ import annotations

from pathlib import Path

from pkg_templates_yo.errors import UnknownLicenseError

LICENSE_DIR = Path(__file__).resolve().parent / "licenses"

# Display names for the licenses shipped with the package, in listing order.
LICENSE_NAMES: dict[str, str] = {
    "BSD2": 'Simplified "2-clause" BSD License',
    "BSD3": 'Modified "3-clause" BSD License',
    "ISC": "Internet Systems Consortium License",
    "MIT": 'MIT "Expat" License',
    "Unlicense": "The Unlicense",
}


class LicenseStore:
    """Look up license texts stored as files in ``directory``."""

    def __init__(self, directory: str | Path = LICENSE_DIR, names: dict[str, str] | None = None) -> None:
        self.directory = Path(directory)
        self._names = dict(LICENSE_NAMES if names is None else names)

    def exists(self, license_id: str) -> bool:
        """Return True if ``license_id`` names a stored license."""
        if not license_id or "/" in license_id or license_id.startswith("."):
            return False
        return (self.directory / license_id).is_file()

    def text(self, license_id: str) -> str:
        """Return the full text of ``license_id`` without a trailing newline."""
        if not self.exists(license_id):
            raise UnknownLicenseError(license_id)
        return (self.directory / license_id).read_text(encoding="utf-8").rstrip("\n")

    def available(self) -> list[tuple[str, str]]:
        """Return ``(id, display name)`` pairs for every stored license, sorted by id."""
        ids = sorted(p.name for p in self.directory.iterdir() if p.is_file())
        return [(i, self._names.get(i, i)) for i in ids]


DEFAULT_LICENSES = LicenseStore()

"""Plaintext ``Release`` and ``Packages`` index formatting.

These are pure functions over already-fetched rows. Field values are written
verbatim; a value containing a newline will corrupt the stanza, so the store
is expected to hold single-line values.
"""

from collections.abc import Iterable

from .constants import ARCHITECTURE, COMMERCIAL_TAG
from .models import PackageInfo, ReleaseInfo


def format_release_block(release: ReleaseInfo) -> str:
    """Format a single release row as an 8-line ``Release`` record."""
    fields = (
        ("Origin", release.origin),
        ("Label", release.label),
        ("Suite", release.suite),
        ("Version", release.version),
        ("Codename", release.codename),
        ("Architectures", release.architectures),
        ("Components", release.components),
        ("Description", release.description),
    )
    return "".join(f"{label}: {value}\n" for label, value in fields)


def format_release(releases: Iterable[ReleaseInfo]) -> str:
    """Concatenate one ``Release`` record per row, in the order given.

    Records are not separated by a blank line; an empty input yields ``""``.
    """
    return "".join(format_release_block(release) for release in releases)


def package_filename(package: PackageInfo, base_url: str) -> str:
    """URL of the ``.deb`` for a package."""
    return f"{base_url}/debs/{package.name}_{package.version}_{ARCHITECTURE}.deb"


def format_package_block(package: PackageInfo, base_url: str) -> str:
    """Format a single package as a ``Packages`` stanza, blank-line terminated."""
    lines = [
        f"Package: {package.package_id}",
        f"Version: {package.version}",
        f"Section: {package.section}",
        f"Maintainer: {package.developer_name}",
        f"Depends: {package.depends}",
        f"Architecture: {ARCHITECTURE}",
        f"Filename: {package_filename(package, base_url)}",
        f"Size: {package.version_size:d}",
        f"SHA256: {package.version_hash}",
        f"Description: {package.short_description}",
        f"Name: {package.name}",
        f"Author: {package.developer_name}",
        f"SileoDepiction: {base_url}/sileodepiction/{package.package_id}",
        f"Depiction: {base_url}/depiction/{package.package_id}",
    ]
    if package.is_commercial:
        lines.append(f"Tag: {COMMERCIAL_TAG}")
    lines.append(f"Icon: {package.icon}")
    return "\n".join(lines) + "\n\n"


def format_packages(packages: Iterable[PackageInfo], base_url: str) -> str:
    """Concatenate one ``Packages`` stanza per package, in the order given."""
    return "".join(format_package_block(package, base_url) for package in packages)

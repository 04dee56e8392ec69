# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""REST interface for the cupping lab (requires the ``api`` extra)."""


def check_dependency(package: str, install_hint: str) -> None:
    """Raise *ImportError* with a helpful message if *package* is missing."""
    try:
        __import__(package)
    except ImportError:
        raise ImportError(
            f"The REST API requires '{package}'. Install with: {install_hint}"
        ) from None

"""Static asset path table.

Maps asset names used by templates to the path they are served under.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"
STATIC_URL = "/static"

ASSETS: Mapping[str, str] = MappingProxyType(
    {
        "stylesheet": f"{STATIC_URL}/css/main.css",
        "favicon": f"{STATIC_URL}/favicon.svg",
    }
)


def asset_path(name: str) -> str:
    """Served path for an asset name.

    Raises:
        KeyError: If the asset is unknown.
    """
    return ASSETS[name]

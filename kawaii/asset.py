"""Asset index of a game version."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx

from kawaii.version import DEFAULT_ROOT, Version


@asynccontextmanager
async def _http(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the given client, or a fresh one that is closed afterwards."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(follow_redirects=True) as own_client:
        yield own_client


@dataclass
class Asset:
    """One object of the asset store, addressed by its hash."""

    hash: str
    size: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Asset:
        return cls(hash=data["hash"], size=int(data["size"]))


@dataclass
class Assets:
    """All objects of an asset index, keyed by their logical name."""

    objects: dict[str, Asset] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Assets:
        return cls(
            objects={name: Asset.from_dict(item) for name, item in data["objects"].items()}
        )


async def get_assets(
    version: Version,
    root: Path | str = DEFAULT_ROOT,
    client: httpx.AsyncClient | None = None,
) -> Assets:
    """Load the version's asset index from disk, or fetch it when not cached."""
    path = Path(root) / "assets" / "indexes" / f"{version.asset_index.id}.json"
    if path.exists():
        return Assets.from_dict(json.loads(path.read_text(encoding="utf-8")))

    async with _http(client) as http:
        response = await http.get(version.asset_index.url)
        response.raise_for_status()
        return Assets.from_dict(response.json())
"""Fetching of everything a game version needs: assets, libraries and the client."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import httpx

from kawaii.asset import _http, get_assets
from kawaii.version import DEFAULT_ROOT, Artifact, Library, Version, get_versions

ASSET_BASE_URL = "https://resources.download.minecraft.net"
ASSET_CONCURRENCY = 100
LIBRARY_CONCURRENCY = 20


def _artifact_of(library: Library) -> Artifact:
    """Return the library's main artifact; every launched library must have one."""
    artifact = library.downloads.artifact
    if artifact is None:
        raise ValueError(f"library {library.name!r} has no artifact")
    return artifact


async def _fetch_bytes(client: httpx.AsyncClient, url: str) -> bytes:
    response = await client.get(url)
    response.raise_for_status()
    return response.content


async def _fetch_all_missing(
    client: httpx.AsyncClient,
    concurrency: int,
    targets: list[tuple[str, Path, str]],
) -> None:
    """Download each (url, path, label) whose path is absent, reporting failures."""
    semaphore = asyncio.Semaphore(concurrency)

    async def fetch(url: str, path: Path, label: str) -> None:
        if path.exists():
            return
        async with semaphore:
            try:
                data = await _fetch_bytes(client, url)
            except httpx.HTTPError as error:
                print(f"Network error for {label}: {error}", file=sys.stderr)
                return
        path.parent.mkdir(parents=True, exist_ok=True)
        if not path.exists():
            print(f"Writing to {path}")
            path.write_bytes(data)

    await asyncio.gather(*(fetch(*target) for target in targets))


def object_path(objects_dir: Path | str, object_hash: str) -> Path:
    """Return where an asset object is stored: <objects>/<first two chars>/<hash>."""
    return Path(objects_dir) / object_hash[:2] / object_hash


async def download_assets(
    version: Version,
    root: Path | str = DEFAULT_ROOT,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Download the asset index and every asset object that is not on disk yet."""
    assets_dir = Path(root) / "assets"
    index_path = assets_dir / "indexes" / f"{version.assets}.json"
    objects_dir = assets_dir / "objects"

    index_path.parent.mkdir(parents=True, exist_ok=True)
    objects_dir.mkdir(parents=True, exist_ok=True)

    async with _http(client) as http:
        if not index_path.exists():
            print(f"Downloading {version.asset_index.url}")
            index_path.write_bytes(await _fetch_bytes(http, version.asset_index.url))

        assets = await get_assets(version, root, http)
        hashes = {asset.hash for asset in assets.objects.values()}
        targets = [
            (
                f"{ASSET_BASE_URL}/{object_hash[:2]}/{object_hash}",
                object_path(objects_dir, object_hash),
                object_hash,
            )
            for object_hash in hashes
        ]
        await _fetch_all_missing(http, ASSET_CONCURRENCY, targets)


async def download_libraries(
    version: Version,
    root: Path | str = DEFAULT_ROOT,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Download every library artifact of the version that is not on disk yet."""
    libraries_dir = Path(root) / "libraries"
    targets = [
        (artifact.url, libraries_dir / artifact.path, artifact.url)
        for artifact in map(_artifact_of, version.libraries)
    ]
    async with _http(client) as http:
        await _fetch_all_missing(http, LIBRARY_CONCURRENCY, targets)


async def download_version(
    version: Version,
    root: Path | str = DEFAULT_ROOT,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Download the client jar and the version's JSON description."""
    version_dir = Path(root) / "versions" / version.id
    jar_path = version_dir / f"{version.id}.jar"
    json_path = version_dir / f"{version.id}.json"
    version_dir.mkdir(parents=True, exist_ok=True)

    async with _http(client) as http:
        if not jar_path.exists():
            print(f"Downloading {version.id}")
            client_download = version.downloads.get("client")
            if client_download is None:
                raise LookupError(f"version {version.id!r} has no client download")
            jar_path.write_bytes(await _fetch_bytes(http, client_download.url))

        if not json_path.exists():
            print(f"Downloading {version.id}")
            manifest = await get_versions(http)
            selected = manifest.find(version.id)
            json_path.write_bytes(await _fetch_bytes(http, selected.url))


async def start_download(
    version: Version,
    root: Path | str = DEFAULT_ROOT,
    client: httpx.AsyncClient | None = None,
) -> None:
    """Run the asset, library and version downloads together and wait for all."""
    async with _http(client) as http:
        await asyncio.gather(
            download_assets(version, root, http),
            download_libraries(version, root, http),
            download_version(version, root, http),
        )
"""Version manifest and per-version metadata from the game's metadata service."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx

VERSION_MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"
DEFAULT_ROOT = Path("minecraft")


@asynccontextmanager
async def _http(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(follow_redirects=True) as own_client:
        yield own_client


async def _fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    response = await client.get(url)
    response.raise_for_status()
    return response.json()


@dataclass
class Latest:
    """The newest release and snapshot identifiers."""

    release: str
    snapshot: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Latest:
        return cls(release=data["release"], snapshot=data["snapshot"])


@dataclass
class VersionSummary:
    """One entry of the version manifest."""

    id: str
    type: str
    url: str
    time: str
    release_time: str
    sha1: str
    compliance_level: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VersionSummary:
        return cls(
            id=data["id"],
            type=data["type"],
            url=data["url"],
            time=data["time"],
            release_time=data["releaseTime"],
            sha1=data["sha1"],
            compliance_level=int(data["complianceLevel"]),
        )


@dataclass
class VersionManifest:
    """The list of all published versions."""

    latest: Latest
    versions: list[VersionSummary] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VersionManifest:
        return cls(
            latest=Latest.from_dict(data["latest"]),
            versions=[VersionSummary.from_dict(item) for item in data["versions"]],
        )

    def find(self, version_id: str) -> VersionSummary:
        """Return the entry with the given id, or raise LookupError."""
        for summary in self.versions:
            if summary.id == version_id:
                return summary
        raise LookupError(f"version {version_id!r} not found in manifest")


@dataclass
class AssetIndex:
    """Where the asset index of a version lives."""

    id: str
    sha1: str
    size: int
    total_size: int
    url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AssetIndex:
        return cls(
            id=data["id"],
            sha1=data["sha1"],
            size=int(data["size"]),
            total_size=int(data["totalSize"]),
            url=data["url"],
        )


@dataclass
class VersionDownload:
    """A downloadable file of a version, such as the client jar."""

    sha1: str
    size: int
    url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VersionDownload:
        return cls(sha1=data["sha1"], size=int(data["size"]), url=data["url"])


@dataclass
class Artifact:
    """A library file with its path below the libraries folder."""

    path: str
    sha1: str
    size: int
    url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Artifact:
        return cls(
            path=data["path"],
            sha1=data["sha1"],
            size=int(data["size"]),
            url=data["url"],
        )


@dataclass
class Downloads:
    """The main artifact and native classifiers of a library."""

    artifact: Artifact | None = None
    classifiers: dict[str, Artifact] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Downloads:
        artifact = data.get("artifact")
        classifiers = data.get("classifiers")
        return cls(
            artifact=Artifact.from_dict(artifact) if artifact is not None else None,
            classifiers=(
                {name: Artifact.from_dict(item) for name, item in classifiers.items()}
                if classifiers is not None
                else None
            ),
        )


@dataclass
class Library:
    """A library a version needs on its classpath."""

    downloads: Downloads
    extract: Any = None
    name: str | None = None
    natives: Any = None
    rules: list[Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Library:
        return cls(
            downloads=Downloads.from_dict(data["downloads"]),
            extract=data.get("extract"),
            name=data.get("name"),
            natives=data.get("natives"),
            rules=data.get("rules"),
        )


@dataclass
class Version:
    """Full metadata of one game version."""

    asset_index: AssetIndex
    assets: str
    compliance_level: int
    downloads: dict[str, VersionDownload]
    id: str
    java_version: Any
    libraries: list[Library]
    main_class: str
    minimum_launcher_version: int
    release_time: str
    time: str
    type: str
    arguments: Any = None
    logging: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Version:
        return cls(
            arguments=data.get("arguments"),
            asset_index=AssetIndex.from_dict(data["assetIndex"]),
            assets=data["assets"],
            compliance_level=int(data["complianceLevel"]),
            downloads={
                name: VersionDownload.from_dict(item)
                for name, item in data["downloads"].items()
            },
            id=data["id"],
            java_version=data["javaVersion"],
            libraries=[Library.from_dict(item) for item in data["libraries"]],
            logging=data.get("logging"),
            main_class=data["mainClass"],
            minimum_launcher_version=int(data["minimumLauncherVersion"]),
            release_time=data["releaseTime"],
            time=data["time"],
            type=data["type"],
        )


async def get_versions(client: httpx.AsyncClient | None = None) -> VersionManifest:
    """Fetch and parse the version manifest."""
    async with _http(client) as http:
        return VersionManifest.from_dict(await _fetch_json(http, VERSION_MANIFEST_URL))


async def get_version(
    version_id: str,
    root: Path | str = DEFAULT_ROOT,
    client: httpx.AsyncClient | None = None,
) -> Version:
    """Load a version from the local cache, or fetch it through the manifest."""
    version_id = version_id.strip()
    path = Path(root) / "versions" / version_id / f"{version_id}.json"
    if path.exists():
        return Version.from_dict(json.loads(path.read_text(encoding="utf-8")))

    async with _http(client) as http:
        manifest = await get_versions(http)
        selected = manifest.find(version_id)
        return Version.from_dict(await _fetch_json(http, selected.url))


async def get_versions_types(client: httpx.AsyncClient | None = None) -> list[str]:
    """Return the distinct version types of the manifest, sorted."""
    manifest = await get_versions(client)
    return sorted({summary.type for summary in manifest.versions})
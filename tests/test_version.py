import json

import httpx
import pytest
import respx

from kawaii.version import (
    VERSION_MANIFEST_URL,
    Artifact,
    AssetIndex,
    Downloads,
    Latest,
    Library,
    Version,
    VersionDownload,
    VersionManifest,
    VersionSummary,
    get_version,
    get_versions,
    get_versions_types,
)

STAMP = "2024-01-01T00:00:00+00:00"
META = "https://meta.example.com"


def summary_dict(version_id, kind):
    return {
        "id": version_id,
        "type": kind,
        "url": f"{META}/{version_id}.json",
        "time": STAMP,
        "releaseTime": STAMP,
        "sha1": "abc",
        "complianceLevel": 1,
    }


def manifest_dict():
    kinds = [("24w01a", "snapshot"), ("1.20", "release"), ("1.19", "release"), ("a1.0", "old_alpha")]
    return {
        "latest": {"release": "1.20", "snapshot": "24w01a"},
        "versions": [summary_dict(version_id, kind) for version_id, kind in kinds],
    }


def version_dict(version_id="1.20"):
    library_artifact = {
        "path": "org/example/lib/1.0/lib-1.0.jar",
        "sha1": "l1",
        "size": 7,
        "url": "https://libs.example.com/lib-1.0.jar",
    }
    return {
        "assetIndex": {"id": "5", "sha1": "def", "size": 10, "totalSize": 100, "url": f"{META}/assets/5.json"},
        "assets": "5",
        "complianceLevel": 1,
        "downloads": {"client": {"sha1": "c1", "size": 42, "url": f"{META}/client.jar"}},
        "id": version_id,
        "javaVersion": {"component": "java-runtime", "majorVersion": 17},
        "libraries": [{"downloads": {"artifact": library_artifact}, "name": "org.example:lib:1.0"}],
        "mainClass": "net.example.Main",
        "minimumLauncherVersion": 21,
        "releaseTime": STAMP,
        "time": STAMP,
        "type": "release",
    }


@pytest.fixture
def manifest_router():
    with respx.mock(assert_all_called=False) as router:
        router.get(VERSION_MANIFEST_URL).respond(json=manifest_dict())
        yield router


def test_latest_from_dict():
    latest = Latest.from_dict({"release": "1.20", "snapshot": "24w01a"})
    assert latest == Latest(release="1.20", snapshot="24w01a")


def test_version_summary_reads_camel_case():
    summary = VersionSummary.from_dict(summary_dict("1.20", "release"))
    assert summary.release_time == STAMP
    assert summary.compliance_level == 1
    assert summary.type == "release"


def test_manifest_find_and_missing():
    manifest = VersionManifest.from_dict(manifest_dict())
    assert manifest.latest.release == "1.20"
    assert manifest.find("1.19").url == f"{META}/1.19.json"
    with pytest.raises(LookupError):
        manifest.find("nope")


def test_asset_index_and_download():
    index = AssetIndex.from_dict(version_dict()["assetIndex"])
    assert index.total_size == 100
    download = VersionDownload.from_dict({"sha1": "s", "size": 3, "url": "u"})
    assert download == VersionDownload(sha1="s", size=3, url="u")


def test_downloads_with_classifiers_only():
    artifact = {"path": "p", "sha1": "s", "size": 1, "url": "u"}
    downloads = Downloads.from_dict({"classifiers": {"natives-linux": artifact}})
    assert downloads.artifact is None
    assert downloads.classifiers == {"natives-linux": Artifact.from_dict(artifact)}


def test_library_optional_fields_default_to_none():
    library = Library.from_dict({"downloads": {}})
    assert library.name is None
    assert library.rules is None
    assert library.downloads == Downloads()


def test_version_from_dict():
    version = Version.from_dict(version_dict())
    assert version.id == "1.20"
    assert version.main_class == "net.example.Main"
    assert version.asset_index.id == "5"
    assert version.downloads["client"].url == f"{META}/client.jar"
    assert version.libraries[0].downloads.artifact.path == "org/example/lib/1.0/lib-1.0.jar"
    assert version.arguments is None
    assert version.logging is None


def test_version_missing_required_field():
    data = version_dict()
    del data["mainClass"]
    with pytest.raises(KeyError):
        Version.from_dict(data)


@pytest.mark.asyncio
async def test_get_versions_fetches_manifest(manifest_router):
    async with httpx.AsyncClient() as client:
        manifest = await get_versions(client)
    assert [v.id for v in manifest.versions] == ["24w01a", "1.20", "1.19", "a1.0"]


@pytest.mark.asyncio
async def test_get_versions_types_sorted_and_unique(manifest_router):
    types = await get_versions_types()
    assert types == sorted(set(types))
    assert types == ["old_alpha", "release", "snapshot"]


@pytest.mark.asyncio
async def test_get_version_reads_local_cache(tmp_path, manifest_router):
    folder = tmp_path / "versions" / "1.20"
    folder.mkdir(parents=True)
    (folder / "1.20.json").write_text(json.dumps(version_dict()), encoding="utf-8")
    version = await get_version("  1.20 ", tmp_path)
    assert version == Version.from_dict(version_dict())
    assert not manifest_router.routes[0].called


@pytest.mark.asyncio
async def test_get_version_downloads_through_manifest(tmp_path, manifest_router):
    route = manifest_router.get(f"{META}/1.19.json").respond(json=version_dict("1.19"))
    async with httpx.AsyncClient() as client:
        version = await get_version("1.19\n", tmp_path, client)
    assert route.called
    assert version.id == "1.19"


@pytest.mark.asyncio
async def test_get_version_unknown_id(tmp_path, manifest_router):
    with pytest.raises(LookupError):
        await get_version("9.99", tmp_path)


@pytest.mark.asyncio
async def test_get_versions_http_error():
    with respx.mock:
        respx.get(VERSION_MANIFEST_URL).respond(status_code=500)
        with pytest.raises(httpx.HTTPStatusError):
            await get_versions()
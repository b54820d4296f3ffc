"""Preparing the game folder and starting the game."""

from __future__ import annotations

import argparse
import asyncio
import platform
import subprocess
from pathlib import Path

import httpx

from kawaii.downloader import _artifact_of, start_download
from kawaii.version import DEFAULT_ROOT, Version, get_version

LAUNCHER_BRAND = "Kawaii"
LAUNCHER_VERSION = 100
OFFLINE_UUID = "00000000-0000-0000-0000-000000000000"
_X86_MACHINES = {"x86", "i386", "i486", "i586", "i686"}


def create_folders(root: Path | str = DEFAULT_ROOT) -> None:
    """Create the game folder and its assets, libraries, versions and bin folders."""
    root = Path(root)
    for folder in (root, root / "assets", root / "libraries", root / "versions", root / "bin"):
        folder.mkdir(parents=True, exist_ok=True)


def library_paths(version: Version, root: Path | str = DEFAULT_ROOT) -> list[str]:
    """Return the on-disk path of every library artifact of the version."""
    libraries_dir = Path(root) / "libraries"
    return [str(libraries_dir / _artifact_of(library).path) for library in version.libraries]


def build_command(
    username: str,
    version: Version,
    root: Path | str = DEFAULT_ROOT,
    system: str | None = None,
    machine: str | None = None,
) -> list[str]:
    """Build the java command line that starts the given version."""
    system = platform.system() if system is None else system
    machine = platform.machine() if machine is None else machine
    windows = system == "Windows"

    root = Path(root)
    natives = str(root / "bin")
    separator = ";" if windows else ":"
    jar = str(root / "versions" / version.id / f"{version.id}.jar")
    classpath = f"{jar}{separator}{separator.join(library_paths(version, root))}"

    command = ["javaw" if windows else "java"]
    if system == "Darwin":
        command.append("-XstartOnFirstThread")
    if windows:
        command.append(
            "-XX:HeapDumpPath=MojangTricksIntelDriversForPerformance_javaw.exe_minecraft.exe.heapdump"
        )
    if machine.lower() in _X86_MACHINES:
        command.append("-Xss1M")
    command += [
        f"-Djava.library.path={natives}",
        f"-Djna.tmpdir={natives}",
        f"-Dorg.lwjgl.system.SharedLibraryExtractPath={natives}",
        f"-Dio.netty.native.workdir={natives}",
        f"-Dminecraft.launcher.brand={LAUNCHER_BRAND}",
        f"-Dminecraft.launcher.version={LAUNCHER_VERSION}",
        "-cp",
        classpath,
        version.main_class,
        "--username",
        username,
        "--version",
        version.id,
        "--gameDir",
        str(root),
        "--assetsDir",
        str(root / "assets"),
        "--assetIndex",
        version.asset_index.id,
        "--uuid",
        OFFLINE_UUID,
        "--accessToken",
        "0",
        "--versionType",
        version.type,
    ]
    return command


async def launch_game(
    username: str,
    version_id: str,
    root: Path | str = DEFAULT_ROOT,
    client: httpx.AsyncClient | None = None,
) -> subprocess.Popen:
    """Download what the version needs, then start the game and return its process."""
    create_folders(root)
    await start_download(await get_version(version_id, root, client), root, client)
    print(f"Start launching the game as {username} in {version_id}!")
    version = await get_version(version_id, root, client)
    return subprocess.Popen(build_command(username, version, root))


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point: launch a version as the given player."""
    parser = argparse.ArgumentParser(prog="kawaii", description="Launch the game.")
    parser.add_argument("username", help="player name")
    parser.add_argument("version", help="version id, such as 1.20.1")
    parser.add_argument(
        "--root", type=Path, default=DEFAULT_ROOT, help="game folder (default: %(default)s)"
    )
    args = parser.parse_args(argv)
    asyncio.run(launch_game(args.username, args.version, args.root))
    return 0
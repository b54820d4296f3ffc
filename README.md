# kawaii

A small Minecraft launcher. Given a player name and a version id, it reads the
version description from the official version manifest, downloads the client
jar, the libraries and the game assets into a local `minecraft/` folder, and
then starts the game with `java` (`javaw` on Windows).

Files already on disk are not downloaded again. This means a second launch of
the same version starts without fetching anything.

## Installation

```
pip install .
```

To play, a Java runtime must be installed and on your `PATH`.

## Usage

```
kawaii <username> <version> [--root DIR]
```

For example:

```
kawaii Steve 1.20.4
```

`--root` selects the game folder. The default is `minecraft` in the current
directory. The command starts the game process and returns without waiting
for it to exit.

The game folder is laid out like this:

```
minecraft/
    assets/indexes/    asset index files
    assets/objects/    asset objects, stored as <first two hash chars>/<hash>
    libraries/         library jars, at the path each library names
    versions/<id>/     <id>.jar and <id>.json
    bin/               native library folder passed to the game
```

Downloads run concurrently: up to 100 asset objects at a time and up to 20
libraries at a time. If one asset object or library fails with a network
error, the error is reported on standard error and that file is skipped.
Failures while fetching the manifest, the asset index or the client jar raise
an exception.

## Using it as a library

All functions are `asyncio` coroutines. Each one accepts an optional
`httpx.AsyncClient` and a game folder:

```python
import asyncio
import httpx

from kawaii.version import get_versions_types, get_version
from kawaii.downloader import start_download

async def run():
    async with httpx.AsyncClient(follow_redirects=True) as client:
        print(await get_versions_types(client))
        version = await get_version("1.20.4", "minecraft", client)
        await start_download(version, "minecraft", client)

asyncio.run(run())
```

- `kawaii.version` reads the version manifest and version descriptions, and
  parses them into dataclasses (`VersionManifest`, `Version`, `Library`, …).
  - `get_versions` returns the manifest.
  - `get_versions_types` returns the sorted distinct version types.
  - `get_version` reads `versions/<id>/<id>.json` if it exists. Otherwise it
    looks the id up in the manifest, which raises `LookupError` if the id is
    unknown.
- `kawaii.asset` reads an asset index with `get_assets`. It uses the cached
  index file if present.
- `kawaii.downloader` handles the downloads:
  - `download_assets`, `download_libraries` and `download_version` each fetch
    one part.
  - `start_download` runs all three together.
  - `object_path` gives the on-disk location of an asset object.
- `kawaii.launcher` prepares and starts the game:
  - `create_folders` prepares the folders.
  - `library_paths` lists the classpath jars.
  - `build_command` builds the Java command line. It takes an optional
    operating system and machine, which otherwise come from `platform`.
  - `launch_game` downloads what is needed, starts the game and returns the
    `subprocess.Popen`.
  - `main` is the command-line entry point.

## What it does not do

- **Accounts:** there is no sign-in. The game always starts with a zero UUID
  and access token `0`.
- **Native libraries:** native classifiers are not downloaded or extracted.
  `bin/` is created but nothing is put in it.
- **Library rules:** these are not evaluated, so every library of a version is
  downloaded. A library without a main artifact raises `ValueError`.
- **Checksums:** sizes and SHA-1 sums are parsed but never checked against the
  downloaded files.
- **Launch arguments:** the version's `arguments` and `logging` sections are
  not applied to the command line.
- **Interface:** there is no graphical interface, only the `kawaii` command.

## Running the tests

```
pip install ".[test]"
pytest
```
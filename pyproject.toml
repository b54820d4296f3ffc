[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kawaii"
version = "0.1.0"
description = "A small Minecraft launcher: fetches game versions, libraries and assets, then starts the game"
requires-python = ">=3.10"
keywords = ["minecraft", "launcher", "game", "downloader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
kawaii = "kawaii.launcher:main"

[tool.hatch.build.targets.wheel]
packages = ["kawaii"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rssify"
version = "0.12.0"
description = "RSS toolkit: canonical feed and entry IDs, domain records and a filesystem repository"
requires-python = ">=3.10"
keywords = ["rss", "feeds", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rssify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cinder"
version = "0.19.8"
description = "Building blocks of a static site generator: front matter, permalinks, site data, file walking and pagination"
requires-python = ">=3.11"
keywords = ["static", "site", "generator", "pagination", "permalink", "front matter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
    "unidecode",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

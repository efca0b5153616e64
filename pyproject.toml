[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hort"
version = "0.1.0"
description = "Data hoarding and indexing framework"
requires-python = ">=3.10"
keywords = ["archiving", "hoarding", "scraping", "indexing", "pastebin", "imgur"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: System :: Archiving",
]
dependencies = [
    "pyyaml",
    "requests",
    "pymongo",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hortd = "hort.registry:main"

[tool.hatch.build.targets.wheel]
packages = ["hort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true

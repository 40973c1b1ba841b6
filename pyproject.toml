[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fhashkit"
version = "1.0.0"
description = "Compute MD5, SHA1, SHA256 and CRC32 checksums of files, with a small command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "checksum", "md5", "sha1", "sha256", "crc32"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fhash = "fhashkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fhashkit"]

[tool.pytest.ini_options]
addopts = "-ra"

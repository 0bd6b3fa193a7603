[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tonekit"
version = "0.1.0"
description = "Service helpers: error aggregation, stack capture, checksums, AES, request signing, rate limiting, pagination and logging aids"
requires-python = ">=3.10"
keywords = ["errors", "aggregate", "rate-limit", "signing", "aes", "pagination", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tonekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

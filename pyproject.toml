[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpufeat"
version = "0.1.0"
description = "Describe AArch64 CPU features and cache levels, and list them as text or JSON."
requires-python = ">=3.10"
dependencies = []
keywords = ["cpu", "aarch64", "arm64", "hwcap", "cpuinfo", "cache", "features"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
list-cpu-features = "cpufeat.listing:main"

[tool.hatch.build.targets.wheel]
packages = ["cpufeat"]

[tool.hatch.build.targets.sdist]
include = ["cpufeat", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

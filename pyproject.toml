[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuelup"
version = "0.27.3"
description = "Fuel toolchain management: paths, settings, toolchain descriptions, the component store and project overrides"
requires-python = ">=3.11"
keywords = ["fuel", "toolchain", "forc", "fuel-core", "toolchain-manager"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "semver",
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fuelup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

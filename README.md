# fuelup

A library for working with a Fuel toolchain installation from Python: where
files live under `~/.fuelup`, the user's settings, distributable toolchain
names, installed toolchains, the component store and per-project
`fuel-toolchain.toml` overrides.

## Installation

```
pip install .
```

## Layout on disk

`fuelup.paths` gives every location used, all under `~/.fuelup`:

```python
from fuelup import paths

paths.fuelup_dir()                # ~/.fuelup
paths.fuelup_bin_dir()            # ~/.fuelup/bin
paths.toolchains_dir()            # ~/.fuelup/toolchains
paths.toolchain_bin_dir("my-toolchain")
paths.store_dir()                 # ~/.fuelup/store
paths.settings_file()             # ~/.fuelup/settings.toml
paths.canonical_fuelup_dir()      # "$HOME/.fuelup" when it is the default location
paths.get_fuel_toolchain_toml()   # nearest fuel-toolchain.toml above the cwd, or None
```

`paths.ensure_dir_exists(path)` creates a directory and its parents, and
`paths.is_executable(path)` tells whether a path is a regular executable file.

## Settings

```python
from pathlib import Path
from fuelup.settings import SettingsFile

settings = SettingsFile(Path("settings.toml"))
with settings.edit() as s:
    s.default_toolchain = "latest-x86_64-unknown-linux-gnu"
print(settings.read().default_toolchain)
```

Reading a settings file that does not exist yet writes the default settings
to it. Changes made inside `edit()` are saved when the block ends without an
error. `Settings.parse(text)` and `Settings.dumps()` convert to and from TOML.

## Target triples

`TargetTriple("x86_64-apple-darwin")` accepts the architectures `aarch64` and
`x86_64`, the vendors `apple` and `unknown`, and the systems `darwin` and
`linux-gnu`; anything else raises `ValueError`. `TargetTriple.from_host()`
returns the triple of the running machine.

## Toolchain descriptions

Distributable toolchains are named `<channel>`, `<channel>-<target>`,
`<channel>-<YYYY-MM-DD>`, `<channel>-<YYYY-MM-DD>-<target>` or
`<channel>-<target>-<YYYY-MM-DD>`, where the channel is one of `latest`,
`nightly`, `testnet` or `mainnet`:

```python
from fuelup.description import DistToolchainDescription

desc = DistToolchainDescription.parse("nightly-2022-08-30-x86_64-apple-darwin")
str(desc.name)   # "nightly"
desc.date        # datetime.date(2022, 8, 30)
str(desc.target) # "x86_64-apple-darwin"
```

Unknown channel names, misplaced dates and unsupported targets raise
`ValueError`. When no target is given, the host's target is used.

## Installed toolchains

```python
from fuelup.toolchain import Toolchain

Toolchain.all()                       # sorted names of installed toolchains
tc = Toolchain.new("latest")          # latest-<host target>
tc = Toolchain.from_settings()        # the default toolchain; LookupError if none
tc.is_distributed(), tc.exists()
tc.bin_path                           # directory of the toolchain's executables
```

## Component store

```python
from fuelup.store import Store

store = Store.from_env()                        # ~/.fuelup/store, created if missing
store.component_dir_path("fuel-core", "0.15.1") # ~/.fuelup/store/fuel-core-0.15.1
store.has_component("fuel-core", "0.15.1")
store.get_cached_fuels_version("forc", "0.33.0")  # OSError if nothing is cached
```

## Shells

`fuelup.shell.Shell` lists the shells `POSIX`, `BASH`, `ZSH` and `FISH`;
`Shell.BASH.rc_files()` returns their startup files in the home directory.

## Project overrides

A `fuel-toolchain.toml` pins a channel and, optionally, components by version
or by a local binary path:

```toml
[toolchain]
channel = "testnet"

[components]
forc = "./bin/forc"
fuel-core = "0.41.7"
```

`latest` and `nightly` must carry a date (`nightly-2023-01-09`); `testnet` and
`mainnet` need none.

```python
from fuelup.toolchain_override import OverrideCfg, ToolchainOverride

override = ToolchainOverride.from_project_root()
if override is not None:
    override.validate_local_components()          # ValueError if a local binary is unusable
    override.get_component_version("fuel-core")   # semver Version 0.41.7
    override.get_component_path("forc")           # resolved against the file's directory

cfg = OverrideCfg.from_toml(text)                 # ValueError on an invalid file
cfg.to_string_pretty()
```

Each component entry is a `fuelup.component_spec.ComponentSpec`: text that
parses as a semantic version becomes a version spec, anything else a path.

## What this package does not do

There is no command-line program. The package does not download, install,
update or remove toolchains or components, does not create links in
`~/.fuelup/bin`, and does not run or proxy toolchain executables; it reads and
writes the files that describe an installation and answers questions about
them.

## Running the tests

```
pip install .[test]
pytest
```
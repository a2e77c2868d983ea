"""Fuel toolchain paths, settings, toolchain descriptions, component store and project overrides."""

__version__ = "0.27.3"
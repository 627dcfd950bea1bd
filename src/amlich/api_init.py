"""Registers the named calendar presets when `amlich` is imported."""
from .api import set_registry
from .bootstrap import build_registry

set_registry(build_registry())

"""fls: directory listings with readable permissions, bordered tables and trees."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version("fls-cli")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

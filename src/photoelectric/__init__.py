"""Interactive simulator of the photoelectric effect."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("photoelectric")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

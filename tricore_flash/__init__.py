"""tricore-flash - Flash Intel-HEX images to AURIX TC39x targets with Infineon Memtool."""

from importlib.metadata import distribution

from .flash import FlashMode, FlashResult, UploadSession


__version__ = distribution("tricore-flash").version

__all__ = [
    "FlashMode",
    "FlashResult",
    "UploadSession",
    "__version__",
]

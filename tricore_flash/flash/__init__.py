"""Flash domain: driving Infineon Memtool to program a TriCore target.

This package contains:
- Workspace handling for the temporary Memtool input files
- Rendering of the Memtool target configuration and batch script
- The upload session owning workspace and Memtool process
- Flash service for high-level flash operations
"""

from .batch import batch_commands, render_batch
from .memtool_config import render_config
from .models import FlashMode, FlashResult, SessionState
from .service import FlashService, create_flash_service
from .session import UploadSession
from .workspace import Workspace


__all__ = [
    # Service classes and factories
    "FlashService",
    "create_flash_service",
    # Session lifecycle
    "UploadSession",
    "Workspace",
    # Rendering
    "render_config",
    "render_batch",
    "batch_commands",
    # Models and results
    "FlashMode",
    "FlashResult",
    "SessionState",
]

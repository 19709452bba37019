# ==============================================
# String Map Sandbox
# ==============================================
#
# Package Structure:
#
# map_sandbox/
# ├── sandbox.py   # StringMapSandbox: map of reverse(value) → value
# ├── text.py      # TextTransformer: reverse / uppercase / to-text
# └── config.py    # Configuration management and logging setup
#
# ==============================================

from .config import SandboxConfig, configure_logging, get_config
from .sandbox import StringMapSandbox
from .text import TextTransformer

__version__ = "0.1.0"

__all__ = [
    "StringMapSandbox",
    "TextTransformer",
    "SandboxConfig",
    "get_config",
    "configure_logging",
]

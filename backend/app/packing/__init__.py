"""Rectangle packing engine."""

from app.packing.config import GAP, MAX_ATTEMPTS_PER_RECT, PackerConfig
from app.packing.geometry import Rectangle, is_valid_placement
from app.packing.packer import PackResult, pack, pack_detailed
from app.packing.service import generate_artwork

__all__ = [
    "GAP",
    "MAX_ATTEMPTS_PER_RECT",
    "PackerConfig",
    "Rectangle",
    "is_valid_placement",
    "PackResult",
    "pack",
    "pack_detailed",
    "generate_artwork",
]

"""Map checks, DDA ray casting and frame rendering for .cub scenes, with small helpers."""

__version__ = "0.1.0"
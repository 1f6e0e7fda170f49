"""Image preparation for 6-colour 800x480 e-paper panels: palette, dithering,
colour adjustment, 4-bit packing and a dithering command."""

__version__ = "0.1.0"
__all__ = ["palette", "dither", "adjust", "packing", "cli"]
"""Wall textures keyed by the maze character they belong to."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from PIL import Image

from mazecaster.framebuffer import Color

TEXTURE_FILES: dict[str, str] = {
    "+": "assets/wall4.png",
    "-": "assets/wall2.png",
    "|": "assets/wall1.png",
    "g": "assets/wall5.png",
    "#": "assets/wall3.png",
}


class TextureManager:
    """Holds one RGBA image per wall character and samples it."""

    def __init__(self, images: Mapping[str, Image.Image]) -> None:
        self._images = {ch: img.convert("RGBA") for ch, img in images.items()}

    @classmethod
    def load(cls, base_dir: str | Path = ".") -> TextureManager:
        """Load the standard wall textures relative to ``base_dir``."""
        base = Path(base_dir)
        images = {}
        for ch, relative in TEXTURE_FILES.items():
            path = base / relative
            if not path.is_file():
                raise FileNotFoundError(f"Failed to load image {path}")
            with Image.open(path) as img:
                images[ch] = img.convert("RGBA")
        return cls(images)

    def get_pixel_color(self, ch: str, tx: int, ty: int) -> Color:
        """Return the texel at ``(tx, ty)`` clamped to the texture, or white."""
        image = self._images.get(ch)
        if image is None:
            return Color.WHITE
        width, height = image.size
        x = min(tx, width - 1)
        y = min(ty, height - 1)
        if x < 0 or y < 0:
            return Color.WHITE
        return Color(*image.getpixel((x, y)))

    def get_texture(self, ch: str) -> Image.Image | None:
        """Return the texture for ``ch``, or ``None`` if there is none."""
        return self._images.get(ch)
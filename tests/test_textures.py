import pytest
from PIL import Image

from mazecaster.framebuffer import Color
from mazecaster.textures import TEXTURE_FILES, TextureManager


def _checker():
    img = Image.new("RGBA", (4, 3), tuple(Color.BLUE))
    img.putpixel((1, 2), tuple(Color.RED))
    img.putpixel((3, 2), tuple(Color.GREEN))
    return img


def test_get_pixel_color_reads_texel():
    tm = TextureManager({"#": _checker()})
    assert tm.get_pixel_color("#", 1, 2) == Color.RED
    assert tm.get_pixel_color("#", 0, 0) == Color.BLUE


def test_get_pixel_color_clamps_to_edge():
    tm = TextureManager({"#": _checker()})
    assert tm.get_pixel_color("#", 100, 100) == Color.GREEN


def test_unknown_character_is_white():
    tm = TextureManager({"#": _checker()})
    assert tm.get_pixel_color("x", 0, 0) == Color.WHITE


def test_negative_coordinates_are_white():
    tm = TextureManager({"#": _checker()})
    assert tm.get_pixel_color("#", -1, 0) == Color.WHITE


def test_rgb_images_are_converted():
    tm = TextureManager({"+": Image.new("RGB", (2, 2), (1, 2, 3))})
    assert tm.get_pixel_color("+", 1, 1) == Color(1, 2, 3, 255)


def test_get_texture():
    tm = TextureManager({"#": _checker()})
    texture = tm.get_texture("#")
    assert texture.size == (4, 3)
    assert tm.get_texture("?") is None


def test_load_from_directory(tmp_path):
    for index, relative in enumerate(TEXTURE_FILES.values()):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", (2, 2), (index, index, index, 255)).save(path)
    tm = TextureManager.load(tmp_path)
    for index, ch in enumerate(TEXTURE_FILES):
        assert tm.get_pixel_color(ch, 0, 0) == Color(index, index, index, 255)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        TextureManager.load(tmp_path)
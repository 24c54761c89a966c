import sys
from pathlib import Path

import pytest
from PIL import Image

# Ensure project root is on sys.path so `import sentdeck` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def make_image(tmp_path):
    """Write a PNG made of vertical colour bands and return its path."""
    def _make(name="image.png", size=(2, 1), bands=((255, 0, 0), (0, 0, 255))):
        image = Image.new("RGB", size)
        band_width = size[0] / len(bands)
        for x in range(size[0]):
            colour = bands[min(int(x / band_width), len(bands) - 1)]
            for y in range(size[1]):
                image.putpixel((x, y), colour)
        path = tmp_path / name
        image.save(path)
        return path
    return _make

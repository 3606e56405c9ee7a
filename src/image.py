"""
image.py
"""
import logging
from pathlib import Path

from PIL import Image

from src.complex_grid import to_pixel_buffer

SIXTEEN_BIT_SUFFIXES = ('.png', '.tif', '.tiff')


def render_image(grid):
    """
    16-bit grayscale image of the grid, cols wide and rows high.
    """
    return Image.frombytes('I;16B', (grid.cols, grid.rows), to_pixel_buffer(grid))


def save_image(grid, path):
    """
    Saves the grid as an image. PNG and TIFF keep the 16-bit samples; other formats,
    JPEG included, get the high byte of each sample as 8-bit grayscale.
    """
    output_path = Path(path)
    if output_path.suffix.lower() in SIXTEEN_BIT_SUFFIXES:
        image = render_image(grid)
    else:
        image = Image.frombytes('L', (grid.cols, grid.rows), to_pixel_buffer(grid)[0::2])

    image.save(output_path)
    logging.debug('Saved %s image %s', image.mode, output_path)
    return output_path

"""
complex_grid.py

Escape-time grid over a rectangular region of the complex plane. Column index
drives the real axis and row index drives the imaginary axis.
"""
import logging
import math
from concurrent.futures import ALL_COMPLETED, ProcessPoolExecutor, wait
from dataclasses import dataclass
from pathlib import Path

from src.complex_number import Complex

FIELD_WIDTH = 5
SAMPLE_SCALE = 16
SAMPLE_OFFSET = 32000


class InvalidParameter(ValueError):
    """
    Raised when a region, resolution or iteration limit cannot produce a grid.
    """


@dataclass(frozen=True)
class Region:
    """
    Rectangle in the complex plane with (x_start, y_start) as one corner.
    """
    x_start: float
    y_start: float
    width: float
    height: float


@dataclass(frozen=True)
class Resolution:
    """
    Number of sample points along each axis.
    """
    rows: int
    cols: int


@dataclass(frozen=True)
class IterationLimits:
    """
    Per-cell iteration cap and divergence threshold.
    """
    max_iters: int
    max_modulus: float


@dataclass(frozen=True)
class GridMapping:
    """
    Maps grid cells to sample points of the complex plane.
    """
    region: Region
    resolution: Resolution

    @property
    def x_intervals(self):
        """
        Number of intervals along the real axis.
        """
        return self.resolution.cols - 1

    @property
    def y_intervals(self):
        """
        Number of intervals along the imaginary axis.
        """
        return self.resolution.rows - 1

    @property
    def dx(self):
        """
        Real-axis step between adjacent columns.
        """
        return self.region.width / self.x_intervals

    @property
    def dy(self):
        """
        Imaginary-axis step between adjacent rows.
        """
        return self.region.height / self.y_intervals

    def cell_point(self, row, col):
        """
        Complex point sampled by cell (row, col).
        """
        return Complex(self.region.x_start + self.dx * col, self.region.y_start + self.dy * row)


@dataclass(frozen=True)
class EscapeGrid:
    """
    Dense rows x cols container of escape counts, indexed as grid[row, col].
    """
    cells: tuple

    @property
    def rows(self):
        """
        Number of grid rows.
        """
        return len(self.cells)

    @property
    def cols(self):
        """
        Number of grid columns.
        """
        return len(self.cells[0]) if self.cells else 0

    def __getitem__(self, index):
        row, col = index
        return self.cells[row][col]

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)


def validate(region, resolution, limits):
    """
    Fails fast with InvalidParameter instead of dividing by zero or looping without bound.
    """
    if resolution.rows < 2 or resolution.cols < 2:
        raise InvalidParameter(
            f'Resolution must be at least 2 x 2, got {resolution.rows} x {resolution.cols}'
        )
    if not region.width > 0 or not region.height > 0:
        raise InvalidParameter(
            f'Region width and height must be positive, got {region.width} x {region.height}'
        )
    if limits.max_iters < 1:
        raise InvalidParameter(f'Maximum iterations must be at least 1, got {limits.max_iters}')
    if not limits.max_modulus > 0:
        raise InvalidParameter(f'Maximum modulus must be positive, got {limits.max_modulus}')


def calculate_point(c, max_iters, max_modulus):
    """
    Iterates z <- z * z + c from zero and returns the iteration at which |z| reached
    max_modulus. Returns 0 when max_iters is reached first, including the case where
    divergence would have shown on the last iteration.
    """
    z = Complex()
    iters = 0

    while True:
        z = z.times(z).plus(c)
        iters += 1
        if z.modulus() >= max_modulus or iters >= max_iters:
            break

    return 0 if iters >= max_iters else iters


def generate(region, resolution, limits, workers=1):
    """
    Computes the escape grid. With more than one worker the rows are split into
    contiguous blocks and computed in a process pool; the result is identical to
    the sequential one.
    """
    validate(region, resolution, limits)
    mapping = GridMapping(region, resolution)

    if workers is None or workers <= 1:
        cells = _calculate_rows(mapping, limits, 0, resolution.rows)
    else:
        blocks = [balance(resolution.rows, workers, p) for p in range(workers)]
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(_calculate_rows, mapping, limits, lo, hi)
                for lo, hi in blocks if hi > lo
            ]
            wait(futures, return_when=ALL_COMPLETED)

        cells = tuple(row for future in futures for row in future.result())

    logging.debug('Generated %d x %d grid with %d worker(s)', resolution.rows, resolution.cols,
                  workers or 1)
    return EscapeGrid(cells)


def balance(n, p_count, p):
    """
    Returns the half-open interval [lo, hi) of the p'th of p_count blocks when n
    rows are distributed as evenly as possible.
    """
    length = int(math.floor(n / p_count))
    remainder = n - p_count * length
    if p < remainder:
        lo = p * length + p
        hi = lo + length + 1
    else:
        lo = p * length + remainder
        hi = lo + length
    return lo, hi


def _calculate_rows(mapping, limits, lo, hi):
    """
    Escape counts for rows lo up to but excluding hi.
    """
    return tuple(
        tuple(
            calculate_point(mapping.cell_point(i, j), limits.max_iters, limits.max_modulus)
            for j in range(mapping.resolution.cols)
        )
        for i in range(lo, hi)
    )


def to_text(grid):
    """
    One line per row, each count right-justified in a five character field and
    followed by a space.
    """
    return [''.join(f'{count:>{FIELD_WIDTH}} ' for count in row) for row in grid]


def save_text(grid, path):
    """
    Writes the text dump to path and returns it as a Path.
    """
    output_path = Path(path)
    output_path.write_text(''.join(line + '\n' for line in to_text(grid)), encoding='utf-8')
    return output_path


def to_pixel_buffer(grid):
    """
    Packs the grid row-major into 16-bit big-endian grayscale samples of
    (count * 16 + 32000) wrapped to 16 bits.
    """
    pixels = bytearray(grid.rows * grid.cols * 2)
    pixel_count = 0
    for row in grid:
        for count in row:
            sample = (count * SAMPLE_SCALE + SAMPLE_OFFSET) % 65536
            pixels[pixel_count] = sample // 256
            pixels[pixel_count + 1] = sample % 256
            pixel_count += 2
    return bytes(pixels)

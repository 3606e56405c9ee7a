"""
parameters.py

Saved-parameters line and the form state that edits it.
"""
import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path

from src.complex_grid import IterationLimits, Region, Resolution, validate

FIELD_COUNT = 8


class ParameterFileError(ValueError):
    """
    Raised when a saved-parameters file is corrupt or not formatted correctly.
    """


@dataclass(frozen=True)
class GridParameters:
    """
    The eight scalars of a generation request, in saved-line order.
    """
    x_start: float = -2.0
    y_start: float = -1.5
    width: float = 3.0
    height: float = 3.0
    rows: int = 101
    cols: int = 101
    max_iters: int = 1000
    max_modulus: float = 1000.0

    @property
    def region(self):
        """
        Region of the complex plane covered by the grid.
        """
        return Region(self.x_start, self.y_start, self.width, self.height)

    @property
    def resolution(self):
        """
        Rows and columns of the grid.
        """
        return Resolution(self.rows, self.cols)

    @property
    def limits(self):
        """
        Iteration cap and divergence threshold.
        """
        return IterationLimits(self.max_iters, self.max_modulus)

    def validate(self):
        """
        Raises InvalidParameter if these parameters cannot produce a grid.
        """
        validate(self.region, self.resolution, self.limits)
        return self

    @classmethod
    def from_line(cls, line):
        """
        Parses a line of eight whitespace-separated fields. Raises ValueError on
        a wrong field count or a field that does not parse.
        """
        fields = line.split()
        if len(fields) != FIELD_COUNT:
            raise ValueError(f'expected {FIELD_COUNT} fields, found {len(fields)}')
        return cls(
            x_start=float(fields[0]),
            y_start=float(fields[1]),
            width=float(fields[2]),
            height=float(fields[3]),
            rows=int(fields[4]),
            cols=int(fields[5]),
            max_iters=int(fields[6]),
            max_modulus=float(fields[7]),
        )

    def to_line(self):
        return ' '.join(
            _format_number(getattr(self, field.name)) for field in dataclasses.fields(self)
        )


def _format_number(value):
    """
    Shortest round-trip text for a number, without a redundant '.0'.
    """
    text = repr(value)
    return text[:-2] if text.endswith('.0') else text


def read_parameters(path):
    """
    Reads GridParameters from the first line of path.
    """
    with open(path, encoding='utf-8') as params_file:
        line = params_file.readline()
    try:
        return GridParameters.from_line(line)
    except ValueError as e:
        raise ParameterFileError(f'{path} is corrupt or is not formatted correctly: {e}') from e


def write_parameters(path, params):
    """
    Writes params as a single line and returns the Path written.
    """
    output_path = Path(path)
    output_path.write_text(params.to_line() + '\n', encoding='utf-8')
    return output_path


class ParameterForm:
    """
    Field-by-field editing of GridParameters. Edits that do not parse are
    rejected, out-of-range values are clamped or reset, and the interval fields
    stay in step with rows and cols.
    """

    def __init__(self, params=None):
        self.params = params or GridParameters()

    @property
    def row_intervals(self):
        """
        Intervals between rows, always rows - 1.
        """
        return self.params.rows - 1

    @property
    def col_intervals(self):
        """
        Intervals between columns, always cols - 1.
        """
        return self.params.cols - 1

    def set_field(self, name, text):
        """
        Applies one edit. Returns False and leaves the state unchanged when the
        text does not parse.
        """
        setter = getattr(self, f'_set_{name}', None)
        if setter is None:
            raise KeyError(name)
        try:
            changes = setter(text.strip())
        except ValueError:
            logging.debug('Rejected %s=%r', name, text)
            return False
        self.params = dataclasses.replace(self.params, **changes)
        return True

    @staticmethod
    def _set_x_start(text):
        return {'x_start': 0.0 if text in ('', '-') else float(text)}

    @staticmethod
    def _set_y_start(text):
        return {'y_start': 0.0 if text in ('', '-') else float(text)}

    @staticmethod
    def _set_width(text):
        width = float(text)
        return {'width': width if width > 0.0 else 3.0}

    @staticmethod
    def _set_height(text):
        height = float(text)
        return {'height': height if height > 0.0 else 2.0}

    @staticmethod
    def _set_rows(text):
        return {'rows': max(int(text), 2)}

    @staticmethod
    def _set_cols(text):
        return {'cols': max(int(text), 2)}

    @staticmethod
    def _set_row_intervals(text):
        return {'rows': max(int(text), 1) + 1}

    @staticmethod
    def _set_col_intervals(text):
        return {'cols': max(int(text), 1) + 1}

    @staticmethod
    def _set_max_iters(text):
        return {'max_iters': max(int(text), 1)}

    @staticmethod
    def _set_max_modulus(text):
        max_modulus = float(text)
        return {'max_modulus': max_modulus if max_modulus > 0.0 else 1000.0}

    def load(self, path):
        """
        Replaces the parameters with those in path, each field passing through the
        same rules as an edit. On any failure the previous parameters are kept and
        the error propagates.
        """
        loaded = read_parameters(path)
        staged = ParameterForm(loaded)
        for field in dataclasses.fields(loaded):
            staged.set_field(field.name, _format_number(getattr(loaded, field.name)))
        self.params = staged.params
        return self.params

    def save(self, path):
        return write_parameters(path, self.params)

"""
mandelbrot.py
"""
import argparse
import datetime
import logging
import sys

from src.complex_grid import InvalidParameter, generate, save_text
from src.image import save_image
from src.parameters import GridParameters, ParameterFileError, read_parameters, write_parameters

TEXT_FILE = 'out.txt'
IMAGE_FILE = 'Image.jpg'


class Mandelbrot:
    """
    Command line front end: loads grid parameters, generates the escape grid,
    writes the text dump and exports the image.
    """

    @staticmethod
    def main(argv=None):
        """
        Configures logging from the command line and invokes the generation process.
        Returns the process exit status.
        """
        args = _parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                            format='%(message)s')
        try:
            Mandelbrot.calculate(args.params, args.text, args.image, args.workers,
                                 args.save_params)
        except (InvalidParameter, ParameterFileError, OSError) as e:
            logging.error('Error: %s', e)
            return 1
        return 0

    @staticmethod
    def calculate(params_file=None, text_file=TEXT_FILE, image_file=IMAGE_FILE, workers=1,
                  save_params_file=None):
        """
        Generates the grid for the parameters in params_file (or the defaults) and
        writes the requested outputs. Logs the output file paths.
        """
        start = datetime.datetime.now().timestamp()

        params = read_parameters(params_file) if params_file else GridParameters()
        params.validate()
        logging.info('Parameters: %s', params.to_line())

        grid = generate(params.region, params.resolution, params.limits, workers=workers)

        if save_params_file:
            logging.info('Saved parameters to %s', write_parameters(save_params_file, params))
        if text_file:
            logging.info('Saved grid to %s', save_text(grid, text_file))
        if image_file:
            logging.info('Saved image to %s', save_image(grid, image_file))

        logging.info('The time was %.3f seconds', datetime.datetime.now().timestamp() - start)
        return grid


def _parse_args(argv):
    parser = argparse.ArgumentParser(description='Mandelbrot set escape grid generator.')
    parser.add_argument('--params', help='file holding the 8-field parameter line')
    parser.add_argument('--save-params', help='write the parameter line used to this file')
    parser.add_argument('--text', default=TEXT_FILE, help='text dump output file')
    parser.add_argument('--image', default=IMAGE_FILE, help='image output file')
    parser.add_argument('--workers', type=int, default=1, help='worker processes')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser.parse_args(argv)


if __name__ == '__main__':
    sys.exit(Mandelbrot.main())

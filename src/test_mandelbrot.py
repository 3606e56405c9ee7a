"""
test_mandelbrot.py
"""
import logging
from src.mandelbrot import Mandelbrot
from src.parameters import GridParameters, write_parameters


def test_calculate_writes_outputs(tmp_path):
    params_path = write_parameters(tmp_path / 'Params.txt',
                                   GridParameters(-2.0, -1.5, 3.0, 3.0, 9, 11, 50, 4.0))
    grid = Mandelbrot.calculate(params_path, tmp_path / 'out.txt', tmp_path / 'Image.png',
                                save_params_file=tmp_path / 'copy.txt')

    lines = (tmp_path / 'out.txt').read_text(encoding='utf-8').splitlines()
    assert len(lines) == 9
    assert all(len(line.split()) == 11 for line in lines)
    assert grid.rows == 9 and grid.cols == 11
    assert (tmp_path / 'Image.png').exists()
    assert (tmp_path / 'copy.txt').read_text(encoding='utf-8') == '-2 -1.5 3 3 9 11 50 4\n'


def test_main_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert Mandelbrot.main(['--workers', '2']) == 0
    lines = (tmp_path / 'out.txt').read_text(encoding='utf-8').splitlines()
    assert len(lines) == 101
    assert (tmp_path / 'Image.jpg').exists()


def test_main_reports_corrupt_parameters(tmp_path, caplog):
    params_path = tmp_path / 'Params.txt'
    params_path.write_text('-2 -1.5 3 3\n', encoding='utf-8')
    with caplog.at_level(logging.ERROR):
        status = Mandelbrot.main(['--params', str(params_path),
                                  '--text', str(tmp_path / 'out.txt'),
                                  '--image', str(tmp_path / 'Image.jpg')])
    assert status == 1
    assert 'not formatted correctly' in caplog.text
    assert not (tmp_path / 'out.txt').exists()


def test_main_reports_invalid_parameters(tmp_path, caplog):
    params_path = write_parameters(tmp_path / 'Params.txt', GridParameters(rows=1))
    with caplog.at_level(logging.ERROR):
        status = Mandelbrot.main(['--params', str(params_path),
                                  '--text', str(tmp_path / 'out.txt')])
    assert status == 1
    assert 'Resolution must be at least 2 x 2' in caplog.text
    assert not (tmp_path / 'out.txt').exists()

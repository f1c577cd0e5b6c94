import pytest

from datespan.mandelbrot import escape_count, main, mandelbrot_grid, render


def test_origin_never_escapes():
    assert escape_count(0.0, 0.0, 16) == 16


def test_far_point_escapes_after_one_step():
    assert escape_count(3.0, 0.0, 16) == 1


def test_minus_one_is_periodic_and_bounded():
    assert escape_count(-1.0, 0.0, 50) == 50


def test_zero_max_count():
    assert escape_count(0.0, 0.0, 0) == 0


def test_grid_shape_and_range():
    grid = mandelbrot_grid(30, 20, 16)
    assert len(grid) == 20
    assert all(len(row) == 30 for row in grid)
    assert all(0 <= value <= 16 for row in grid for value in row)


def test_grid_center_point_is_in_set():
    grid = mandelbrot_grid(100, 100, 16)
    # x = 80 maps to cx = 0, y = 50 maps to cy = 0
    assert grid[49][79] == 16


def test_grid_symmetric_about_real_axis():
    grid = mandelbrot_grid(40, 40, 16)
    # rows y and 100-y are mirror images with yscale -2.5/40 and top 1.25
    assert grid[19 - 1] == grid[40 - 19 - 1]


def test_grid_rejects_bad_size():
    with pytest.raises(ValueError):
        mandelbrot_grid(0, 10)


def test_render_single_blank_cell():
    assert render([[0]]) == "+-+\n| |\n+-+"


def test_render_frame_dimensions():
    grid = mandelbrot_grid(12, 7, 16)
    lines = render(grid).split("\n")
    assert len(lines) == 9
    assert all(len(line) == 14 for line in lines)
    assert lines[0] == lines[-1] == "+" + "-" * 12 + "+"


def test_render_distinguishes_counts():
    lines = render([[0, 16]]).split("\n")
    assert lines[1][1] != lines[1][2]


def test_main_prints_frame(capsys):
    assert main(["--width", "10", "--height", "5"]) == 0
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 7
    assert all(len(line) == 12 for line in lines)
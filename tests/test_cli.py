import struct

import pytest

from raytrace.cli import demo_scene, main
from raytrace.pixel import Rgb


def test_demo_scene_contents():
    scene = demo_scene()
    assert [p.colour for p in scene.props] == [Rgb(0xFF, 0, 0), Rgb(0, 0xFF, 0)]
    assert [p.radius for p in scene.props] == [5.0, 5.0]
    assert scene.bg == Rgb.white()
    assert scene.camera.hfov == 120.0


def test_demo_render_has_both_colours_and_background():
    img = demo_scene().render(32, 18)
    colours = {px for row in img for px in row}
    assert colours <= {Rgb(0xFF, 0, 0), Rgb(0, 0xFF, 0), Rgb.white()}
    assert Rgb.white() in colours
    assert len(colours) >= 2


def test_main_writes_qoi_to_stdout(capsysbinary):
    assert main(["--width", "8", "--height", "6"]) == 0
    out = capsysbinary.readouterr().out
    assert out[:4] == b"qoif"
    assert struct.unpack(">II", out[4:12]) == (8, 6)
    assert out.endswith(b"\0\0\0\0\0\0\0\x01")


def test_main_writes_ppm_file(tmp_path):
    target = tmp_path / "out.ppm"
    assert main(["--width", "5", "--height", "4", "--format", "ppm", "-o", str(target)]) == 0
    data = target.read_bytes()
    assert data.startswith(b"P6\n5 4\n255\n")
    assert len(data) == len(b"P6\n5 4\n255\n") + 5 * 4 * 3
    assert data == demo_scene().render(5, 4).to_ppm_p6()


def test_main_pbm_matches_render(tmp_path):
    target = tmp_path / "out.pbm"
    main(["--width", "6", "--height", "3", "--format", "pbm", "--output", str(target)])
    assert target.read_bytes() == demo_scene().render(6, 3).to_pbm_p1()


def test_main_rejects_non_positive_size():
    with pytest.raises(SystemExit):
        main(["--width", "0"])
import pytest

from minirt.color import Color
from minirt.parser import (
    ParseError,
    check_filetype,
    parse_ambient,
    parse_camera,
    parse_cylinder,
    parse_file,
    parse_light,
    parse_line,
    parse_lines,
    parse_plane,
    parse_sphere,
    parse_vec3,
    split_and_check,
    validate_line,
    validate_orientation,
)
from minirt.scene import (
    Ambient,
    Camera,
    Cylinder,
    Light,
    ObjectType,
    Plane,
    Scene,
    SceneError,
    Sphere,
)
from minirt.vector import Vec3


def test_split_and_check_exact_count():
    assert split_and_check("a,b,c", ",", 3) == ["a", "b", "c"]


def test_split_and_check_drops_empty_pieces():
    assert split_and_check("a,,b,c", ",", 3) == ["a", "b", "c"]


@pytest.mark.parametrize("text", ["a,b", "a,b,c,d", ""])
def test_split_and_check_wrong_count(text):
    with pytest.raises(ParseError):
        split_and_check(text, ",", 3)


def test_parse_error_is_scene_error():
    with pytest.raises(SceneError):
        split_and_check("x", ",", 2)


def test_parse_vec3():
    v = parse_vec3("-40.0,50.0,0.0")
    assert v.x == pytest.approx(-40.0)
    assert v.y == pytest.approx(50.0)
    assert v.z == pytest.approx(0.0)


def test_parse_vec3_rejects_two_components():
    with pytest.raises(ParseError):
        parse_vec3("1,2")


def test_validate_orientation():
    assert validate_orientation(Vec3(0.0, 0.0, 1.0)) is True
    assert validate_orientation(Vec3(0.0, -0.5, 1.0)) is False
    assert validate_orientation(Vec3(1.5, 0.0, 0.0)) is False


def test_validate_line():
    assert validate_line("A\t0.2\t255,255,255\n") is True
    assert validate_line("A\t0.2\t255,255,255") is False
    assert validate_line("L\t-40.0,50.0,0.0\t0.6\t10,0,255\n") is False
    assert validate_line("") is False


@pytest.mark.parametrize(
    "name, expected",
    [("scene.rt", True), ("dir.x/scene.rt", True), ("scene.txt", False),
     ("scene", False), ("scene.rtx", False)],
)
def test_check_filetype(name, expected):
    assert check_filetype(name) is expected


def test_parse_ambient():
    amb = parse_ambient("A\t0.2\t255,255,255\n")
    assert amb.intensity == pytest.approx(0.2)
    assert amb.color == Color(255, 255, 255)
    assert amb.type == ObjectType.AMBIENT


def test_parse_ambient_field_count():
    with pytest.raises(ParseError):
        parse_ambient("A\t0.2\t255,255,255\textra")


def test_parse_camera():
    cam = parse_camera("C\t-50,0,0\t0,0,1\t70")
    assert cam.lookfrom == Vec3(-50.0, 0.0, 0.0)
    assert cam.lookat == Vec3(0.0, 0.0, 1.0)
    assert cam.fov == 70


def test_parse_light():
    light = parse_light("L\t-40.0,50.0,0.0\t0.6\t10,0,255")
    assert light.pos.x == pytest.approx(-40.0)
    assert light.pos.y == pytest.approx(50.0)
    assert light.intensity == pytest.approx(0.6)
    assert light.color == Color(10, 0, 255)


def test_parse_sphere():
    sp = parse_sphere("sp\t0.0,0.0,20.6\t12.6\t10,0,255")
    assert sp.pos.z == pytest.approx(20.6)
    assert sp.diameter == pytest.approx(12.6)
    assert sp.color == Color(10, 0, 255)


def test_parse_cylinder():
    cy = parse_cylinder("cy\t50.0,0.0,20.6\t0,0,1\t14.2\t21.42\t10,0,255")
    assert cy.pos.x == pytest.approx(50.0)
    assert cy.orientation == Vec3(0.0, 0.0, 1.0)
    assert cy.diameter == pytest.approx(14.2)
    assert cy.height == pytest.approx(21.42)
    assert cy.color == Color(10, 0, 255)


def test_parse_cylinder_needs_six_fields():
    with pytest.raises(ParseError):
        parse_cylinder("cy\t50.0,0.0,20.6\t0,0,1\t14.2\t10,0,255")


def test_parse_plane():
    pl = parse_plane("pl\t0.0,0.0,-10.0\t0,1,0\t0,0,225")
    assert pl.pos.z == pytest.approx(-10.0)
    assert pl.orientation == Vec3(0.0, 1.0, 0.0)
    assert pl.color == Color(0, 0, 225)


@pytest.mark.parametrize(
    "line, kind",
    [
        ("A\t0.2\t255,255,255", Ambient),
        ("C\t-50,0,0\t0,0,1\t70", Camera),
        ("L\t-40.0,50.0,0.0\t0.6\t10,0,255", Light),
        ("sp\t0.0,0.0,20.6\t12.6\t10,0,255", Sphere),
        ("cy\t50.0,0.0,20.6\t0,0,1\t14.2\t21.42\t10,0,255", Cylinder),
        ("pl\t0.0,0.0,-10.0\t0,1,0\t0,0,225", Plane),
    ],
)
def test_parse_line_dispatch(line, kind):
    scene = Scene()
    assert parse_line(line, scene) is True
    objects = list(scene)
    assert len(objects) == 1
    assert isinstance(objects[0], kind)


def test_parse_line_unknown():
    scene = Scene()
    assert parse_line("x\t1\t2", scene) is False
    assert len(scene) == 0


def test_parse_lines_builds_in_order():
    scene = parse_lines(
        ["", "A\t0.2\t255,255,255\n", "sp\t0,0,5\t1\t1,2,3\n"]
    )
    assert [obj.type for obj in scene] == [ObjectType.AMBIENT, ObjectType.SPHERE]


def test_parse_lines_rejects_unknown():
    with pytest.raises(ParseError):
        parse_lines(["A\t0.2\t255,255,255\n", "zzz\n"])


def test_parse_lines_scene_limit():
    with pytest.raises(SceneError):
        parse_lines(["sp\t0,0,5\t1\t1,2,3\n"] * 101)


def test_parse_file_round_trip(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text(
        "A\t0.2\t255,255,255\n"
        "L\t-40.0,50.0,0.0\t0.6\t10,0,255\n"
        "pl\t0.0,0.0,-10.0\t0,1,0\t0,0,225\n",
        encoding="utf-8",
    )
    scene = parse_file(path)
    objects = list(scene)
    assert [obj.type for obj in objects] == [
        ObjectType.AMBIENT,
        ObjectType.LIGHT,
        ObjectType.PLANE,
    ]
    assert objects[1].color == Color(10, 0, 255)


def test_parse_file_bad_extension(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text("A\t0.2\t255,255,255\n", encoding="utf-8")
    with pytest.raises(ParseError):
        parse_file(path)


def test_parse_file_missing(tmp_path):
    with pytest.raises(ParseError):
        parse_file(tmp_path / "absent.rt")
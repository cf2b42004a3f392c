import pytest

from minirt.obj_file import load_obj, parse_face_index, parse_obj_lines
from minirt.vec3 import Vec3
from minirt.world import World

TRIANGLE = ["v 0 0 0", "v 1 0 0", "v 0 1 0", "f 1 2 3"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1/2/3", (1, 2, 3)),
        ("4", (4, -1, -1)),
        ("1//3", (1, 3, -1)),
        ("x/1", (-1, -1, -1)),
        (None, (-1, -1, -1)),
        ("", (-1, -1, -1)),
    ],
)
def test_parse_face_index(text, expected):
    assert parse_face_index(text) == expected


def test_parse_triangle():
    obj = parse_obj_lines(TRIANGLE)
    assert len(obj.vertices) == 3
    assert len(obj.triangles) == 1
    tri = obj.triangles[0]
    assert tri.ver1 is obj.vertices[0]
    assert tri.ver2 is obj.vertices[1]
    assert tri.ver3 is obj.vertices[2]
    assert tri.ver2.op == Vec3(1.0, 0.0, 0.0)
    assert tri.norm1 is None


def test_parse_explicit_normals():
    lines = TRIANGLE[:3] + ["vn 0 0 1", "vn 0 1 0", "f 1/1/2 2/1/2 3/1/1"]
    obj = parse_obj_lines(lines)
    tri = obj.triangles[0]
    assert tri.norm1 is obj.normals[1]
    assert tri.norm2 is obj.normals[1]
    assert tri.norm3 is obj.normals[0]
    assert obj.normals[0].op == Vec3(0.0, 0.0, 1.0)


def test_parse_normals_follow_vertex_indices():
    lines = TRIANGLE[:3] + ["vn 0 0 1", "vn 0 0 1", "vn 0 0 1", "f 3 2 1"]
    obj = parse_obj_lines(lines)
    tri = obj.triangles[0]
    assert tri.norm1 is obj.normals[2]
    assert tri.norm3 is obj.normals[0]


def test_short_vertex_line_is_skipped(capsys):
    obj = parse_obj_lines(["v 1 2", "v 1 2 3"])
    assert len(obj.vertices) == 1
    assert obj.vertices[0].op == Vec3(1.0, 2.0, 3.0)
    assert "Wrong float number." in capsys.readouterr().out


def test_face_without_vertex_index_is_skipped():
    obj = parse_obj_lines(TRIANGLE[:3] + ["f a 2 3", "f 1 2"])
    assert obj.triangles == []


def test_face_with_unknown_vertex_raises():
    with pytest.raises(ValueError):
        parse_obj_lines(TRIANGLE[:3] + ["f 1 2 9"])


def test_comments_and_blank_lines_ignored():
    obj = parse_obj_lines(["# comment", "", "vt 0 0"] + TRIANGLE)
    assert len(obj.vertices) == 3
    assert len(obj.triangles) == 1


def test_load_obj_missing_file(tmp_path, capsys):
    world = World()
    missing = tmp_path / "missing.obj"
    assert load_obj(world, str(missing)) is None
    assert "couldn't be open" in capsys.readouterr().out
    assert world.objects == []


def test_load_obj_adds_white_mesh(tmp_path):
    path = tmp_path / "tri.obj"
    path.write_text("\n".join(TRIANGLE) + "\n", encoding="utf-8")
    world = World()
    obj = load_obj(world, str(path))
    assert world.objects == [obj]
    assert obj.color.packed() == 0xFFFFFFFF
    assert all(tri.obj is obj for tri in obj.triangles)
    for vertex in obj.vertices:
        assert tuple(vertex.lp) == pytest.approx(tuple(vertex.op))
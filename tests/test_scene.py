import pytest

from raycaster.scene import (
    Color,
    Scene,
    SceneError,
    TexturePaths,
    check_filename,
    is_empty_line,
    load_scene,
    parse_color,
    parse_elements,
    parse_scene,
    parse_texture,
    valid_color,
)

HEADER = (
    "NO ./textures/north.xpm\n"
    "SO ./textures/south.xpm\n"
    "WE ./textures/west.xpm\n"
    "EA ./textures/east.xpm\n"
    "\n"
    "F 220,100,0\n"
    "C 225,30,0\n"
    "\n"
)

MAP = "111111\n100001\n10N001\n111111\n"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.cub", True),
        ("maps.cubic", True),
        ("map.ber", False),
        ("map", False),
        ("./maps/a.cub", False),
        ("map.cu", False),
        ("", False),
        (None, False),
    ],
)
def test_check_filename(name, expected):
    assert check_filename(name) is expected


@pytest.mark.parametrize(
    "line, expected",
    [("", True), ("  \t\r\n", True), (" 1 \n", False), ("NO x", False)],
)
def test_is_empty_line(line, expected):
    assert is_empty_line(line) is expected


def test_parse_texture_strips_trailing_whitespace():
    textures = TexturePaths()
    assert parse_texture("NO ./north.xpm  \r\n", textures)
    assert textures.north == "./north.xpm"
    assert textures.south is None


def test_parse_texture_rejects_duplicates():
    textures = TexturePaths()
    assert parse_texture("EA a.xpm\n", textures)
    assert not parse_texture("EA b.xpm\n", textures)
    assert textures.east == "a.xpm"


def test_parse_texture_matches_identifier_prefix():
    textures = TexturePaths()
    assert parse_texture("WEST w.xpm", textures)
    assert textures.west == "w.xpm"


@pytest.mark.parametrize("line", ["NO", "NO\t./north.xpm\n", "XX path", "F 1,2,3"])
def test_parse_texture_rejects(line):
    textures = TexturePaths()
    assert not parse_texture(line, textures)
    assert list(textures) == [None, None, None, None]


def test_parse_color_floor_and_ceiling():
    scene = Scene()
    assert parse_color("F 220,100,0\n", scene)
    assert parse_color("C 225,30,0", scene)
    assert scene.floor == Color(220, 100, 0)
    assert scene.ceiling == Color(225, 30, 0)


@pytest.mark.parametrize(
    "line",
    ["F 256,0,0", "F -1,0,0", "F 1,2", "F 1, 2, 3", "F", "X 1,2,3"],
)
def test_parse_color_rejects(line):
    scene = Scene()
    assert not parse_color(line, scene)
    assert scene.floor is None


def test_parse_color_rejects_duplicate():
    scene = Scene()
    assert parse_color("C 1,2,3", scene)
    assert not parse_color("C 4,5,6", scene)
    assert scene.ceiling == Color(1, 2, 3)


def test_parse_color_skips_empty_fields():
    scene = Scene()
    assert parse_color("F 10,,20,30", scene)
    assert scene.floor == Color(10, 20, 30)


def test_parse_elements_leaves_map_lines():
    lines = iter((HEADER + MAP).splitlines(keepends=True))
    scene = parse_elements(lines, Scene())
    assert list(scene.textures) == [
        "./textures/north.xpm",
        "./textures/south.xpm",
        "./textures/west.xpm",
        "./textures/east.xpm",
    ]
    assert next(lines) == "\n"
    assert next(lines) == "111111\n"


def test_parse_elements_missing_element():
    lines = iter(HEADER.splitlines(keepends=True)[:4])
    with pytest.raises(SceneError):
        parse_elements(lines, Scene())


def test_parse_elements_unknown_line():
    lines = iter(["NO a.xpm\n", "111\n"])
    with pytest.raises(SceneError):
        parse_elements(lines, Scene())


def test_valid_color_bounds():
    assert valid_color(Color(1, 2, 3), Color(254, 100, 50))
    assert not valid_color(Color(0, 2, 3), Color(254, 100, 50))
    assert not valid_color(Color(1, 2, 3), Color(255, 100, 50))


def test_parse_scene_full():
    scene = parse_scene(HEADER + MAP)
    assert scene.grid == ["111111", "100001", "10N001", "111111"]
    assert (scene.width, scene.height) == (6, 4)
    assert scene.player.direction == "N"
    assert (scene.player.x, scene.player.y) == (2.5, 2.5)
    assert scene.floor == Color(220, 100, 0)


def test_parse_scene_pads_rows():
    scene = parse_scene(HEADER + "1111\n1E1\n1111\n")
    assert all(len(row) == scene.width for row in scene.grid)
    assert scene.grid[1] == "1E1 "


def test_parse_scene_open_map():
    with pytest.raises(SceneError, match="not closed"):
        parse_scene(HEADER + "1111\n10N1\n1011\n")


def test_parse_scene_invalid_chars():
    text = HEADER + "11111\n10ND1\n11111\n"
    with pytest.raises(SceneError, match="characters"):
        parse_scene(text)
    assert parse_scene(text, bonus=True).grid[1] == "10ND1"


@pytest.mark.parametrize("grid", ["1111\n1001\n1111\n", "11111\n1NS01\n11111\n"])
def test_parse_scene_player_count(grid):
    with pytest.raises(SceneError, match="player"):
        parse_scene(HEADER + grid)


def test_parse_scene_without_map():
    with pytest.raises(SceneError):
        parse_scene(HEADER)


def test_load_scene(tmp_path):
    path = tmp_path / "level.cub"
    path.write_text(HEADER + MAP)
    assert load_scene(path).grid == parse_scene(HEADER + MAP).grid


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(SceneError, match="open"):
        load_scene(tmp_path / "absent.cub")
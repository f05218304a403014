import pytest

from raycaster.texture import DOOR_FILE, SPRITE_FILES, TextureSet, load_textures
from raycaster.xpm import XpmError, parse_xpm


def xpm_text(rgb):
    return (
        "/* XPM */\n"
        "static char *t[] = {\n"
        '"2 2 1 1",\n'
        f'"a c #{rgb:06X}",\n'
        '"aa",\n'
        '"aa"\n'
        "};\n"
    )


WALL_COLORS = (0x110000, 0x002200, 0x000033, 0x444444)


@pytest.fixture
def wall_paths(tmp_path):
    paths = []
    for name, rgb in zip(("no", "so", "we", "ea"), WALL_COLORS):
        path = tmp_path / f"{name}.xpm"
        path.write_text(xpm_text(rgb))
        paths.append(path)
    return paths


@pytest.fixture
def asset_dir(tmp_path):
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / DOOR_FILE).write_text(xpm_text(0x555555))
    for name, rgb in zip(SPRITE_FILES, (0x660000, 0x007700)):
        (assets / name).write_text(xpm_text(rgb))
    return assets


def test_mandatory_textures_in_order(wall_paths):
    textures = load_textures(wall_paths)
    assert [textures.wall(i).color_at(0, 0) for i in range(4)] == list(WALL_COLORS)
    assert textures.door is None
    assert textures.sprites == ()


def test_wall_index_out_of_range(wall_paths):
    textures = load_textures(wall_paths)
    with pytest.raises(IndexError):
        textures.wall(4)
    with pytest.raises(IndexError):
        textures.wall(-1)


def test_bonus_textures(wall_paths, asset_dir):
    textures = load_textures(wall_paths, bonus=True, asset_dir=asset_dir)
    assert textures.door.color_at(1, 1) == 0x555555
    assert [s.color_at(0, 0) for s in textures.sprites] == [0x660000, 0x007700]


def test_bonus_missing_assets(wall_paths, tmp_path):
    with pytest.raises(XpmError):
        load_textures(wall_paths, bonus=True, asset_dir=tmp_path / "nowhere")


def test_missing_wall_file(wall_paths, tmp_path):
    wall_paths[2] = tmp_path / "absent.xpm"
    with pytest.raises(XpmError):
        load_textures(wall_paths)


def test_none_path_rejected(wall_paths):
    wall_paths[0] = None
    with pytest.raises(XpmError):
        load_textures(wall_paths)


def test_wrong_number_of_paths(wall_paths):
    with pytest.raises(ValueError):
        load_textures(wall_paths[:3])


def test_texture_set_needs_four_walls():
    image = parse_xpm(["1 1 1 1", "a c #010203", "a"])
    with pytest.raises(ValueError):
        TextureSet((image, image))
# raycaster

This is the game-logic side of a grid-based first-person raycaster. It
reads `.cub` scene files and checks them. It decodes XPM textures. It moves
the player around the map and turns the player. It uses only the standard
library.

## Installing

    pip install .

To install with the test tools as well:

    pip install ".[test]"

## Scene files

A scene file begins with six elements, in any order. Blank lines may come
between them.

    NO ./textures/north.xpm
    SO ./textures/south.xpm
    WE ./textures/west.xpm
    EA ./textures/east.xpm
    F 220,100,0
    C 225,30,0

The map comes after the elements:

    111111
    100101
    1010N1
    111111

Map cells can be `0` (floor), `1` (wall) or a space (outside the map). One
cell holds `N`, `S`, `E` or `W`, which gives the player's start and facing.
When `bonus=True`, `D` (door) and `2` (sprite) are accepted too. A walkable
cell must not lie on the edge of the map or next to a space. There must be
exactly one player start.

## Usage

    from raycaster.scene import load_scene, check_filename, SceneError
    from raycaster.texture import load_textures
    from raycaster import movement

    assert check_filename("maps/demo.cub")
    try:
        scene = load_scene("maps/demo.cub", bonus=False)
    except SceneError as exc:
        print("Error:", exc)
        raise SystemExit(1)

    textures = load_textures(scene.textures, bonus=False)
    north = textures.wall(0)
    print(north.width, north.height, hex(north.color_at(0, 0)))

    movement.move_forward(scene.player, scene.grid)
    movement.rotate_right(scene.player)

### Modules

- `raycaster.scene`: `parse_scene(text, bonus)` and `load_scene(path, bonus)`
  both return a `Scene`. A `Scene` holds `textures` (a `TexturePaths`),
  `floor` and `ceiling` (a `Color`, whose `.value` is `0xRRGGBB`), the
  padded `grid` rows and the `player`. A bad scene raises `SceneError`.
  The helpers `check_filename`, `is_empty_line`, `parse_texture`,
  `parse_color`, `parse_elements` and `valid_color` are public as well.
- `raycaster.mapgrid`: `parse_map`, `check_map_chars`, `check_map_closed`
  and `find_player`. `Player.facing(x, y, direction)` builds a player with
  its direction and camera plane set.
- `raycaster.movement`: the movement functions are `move_forward`,
  `move_backward`, `move_left` and `move_right`. Walls (`1`) and closed
  doors (`D`) block them. The turning functions are `rotate_player`,
  `rotate_left` and `rotate_right`. `mouse_rotate(player, x, width)` turns
  the player by the pointer's offset from the centre of the screen.
  `interact_door(player, grid)` turns a `D` in front of the player into `O`,
  and an `O` back into `D`.
- `raycaster.xpm`: `load_xpm(path)`, `parse_xpm(lines)` and
  `xpm_from_data(data)` each return an `Image` of `0xAARRGGBB` pixels. A
  colour of `None` becomes `TRANSPARENT`. Bad data raises `XpmError`.
  Other helpers are `strip_comments`, `split_words` and `text_to_rgb`.
- `raycaster.texture`: `load_textures(paths, bonus, asset_dir)` returns a
  `TextureSet` of four wall images. With `bonus`, it also loads `door.xpm`,
  `sprite1.xpm` and `sprite2.xpm` from `asset_dir`.
- `raycaster.colors`: `lookup_color(name)` resolves X11 colour names,
  ignoring case.

## What this package does not do

The package has no ray walk and no frame rendering. It opens no window and
handles no keyboard. It also has no command to start a game. It gives you
the parsed, checked scene, the decoded textures and the player-state
updates. A program that draws the scene has to supply the rendering and the
display itself.
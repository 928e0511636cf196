import pytest

from cubcaster.errors import (
    FINAL_MSG,
    FLR_MSG,
    GAP_MSG,
    NOPLAY_MSG,
    PLAYS_MSG,
    UNX_MSG,
    CubError,
)
from cubcaster.intparse import INT_MAX
from cubcaster.mapgrid import (
    find_longest_usable_string,
    find_shortest_lead,
    has_internal_empty_lines,
    parse_map,
    trim_chars_from_start,
    trim_map,
    trim_trailing_space,
    validate_map,
)
from cubcaster.model import BLOCK, GameMap, Player, Scene, TextureKind


def complete_scene():
    scene = Scene()
    for kind in (TextureKind.NO, TextureKind.SO, TextureKind.EA, TextureKind.WE):
        scene.set_texture_path(kind, "wall.xpm")
    scene.set_color(TextureKind.F, 1)
    scene.set_color(TextureKind.C, 2)
    return scene


GOOD = ["11111", "10001", "10N01", "10001", "11111"]


def test_no_internal_empty_lines():
    assert has_internal_empty_lines("111\n101\n111\n") is False


def test_trailing_empty_lines_allowed():
    assert has_internal_empty_lines("111\n111\n\n  \n") is False


@pytest.mark.parametrize("text", ["111\n\n111\n", "111\n \t \n111"])
def test_internal_empty_lines(text):
    assert has_internal_empty_lines(text) is True


def test_empty_line_check_has_no_memory():
    assert has_internal_empty_lines("1\n\n1") is True
    assert has_internal_empty_lines("1\n1") is False


def test_trim_trailing_space():
    assert trim_trailing_space("111\n101  \n \n") == "111\n101"
    assert trim_trailing_space(" \n\t") == ""


def test_find_shortest_lead():
    assert find_shortest_lead(["  11", " 111", "   1"]) == 1
    assert find_shortest_lead(["111", "  1"]) == 0
    assert find_shortest_lead([]) == INT_MAX


def test_trim_chars_from_start():
    assert trim_chars_from_start("  11", 2) == "11"
    assert trim_chars_from_start("ab", 2) is None
    assert trim_chars_from_start(None, 0) is None


def test_find_longest_usable_string():
    assert find_longest_usable_string(["11  ", "1111", " "]) == 4
    assert find_longest_usable_string([]) == 0


def test_trim_map_removes_lead():
    game_map = trim_map(["  111", "  101 ", "  111"])
    assert game_map.rows == ["111", "101", "111"]
    assert (game_map.width, game_map.height) == (3, 3)


def test_trim_map_pads_rows():
    game_map = trim_map(["1111", "11", " 1"])
    assert game_map.rows == ["1111", "11  ", " 1  "]
    assert all(len(row) == game_map.width for row in game_map.rows)


def test_parse_map_collects_rows():
    scene = complete_scene()
    rows = parse_map(scene, "111\n", iter(["1N1\n", "111\n", "\n"]))
    assert rows == ["111", "1N1", "111"]
    assert scene.map_rows == rows


def test_parse_map_needs_all_elements():
    with pytest.raises(CubError) as info:
        parse_map(Scene(), "111\n", [])
    assert info.value.message == FINAL_MSG


def test_parse_map_rejects_gap():
    with pytest.raises(CubError) as info:
        parse_map(complete_scene(), "111\n", ["\n", "111\n"])
    assert info.value.message == GAP_MSG


def test_validate_map_places_player():
    player = validate_map(GameMap(list(GOOD)), Player())
    facing_north = Player()
    facing_north.set_starting_angle("N")
    assert player.x == 2 * BLOCK + BLOCK // 2
    assert player.y == 2 * BLOCK + BLOCK // 2
    assert player.angle == facing_north.angle


def test_validate_map_two_players():
    rows = ["11111", "1N0S1", "11111"]
    with pytest.raises(CubError) as info:
        validate_map(GameMap(rows), Player())
    assert info.value.message == PLAYS_MSG


def test_validate_map_no_player():
    rows = ["111", "101", "111"]
    with pytest.raises(CubError) as info:
        validate_map(GameMap(rows), Player())
    assert info.value.message == NOPLAY_MSG


def test_validate_map_floor_on_edge():
    rows = ["11111", "1N001", "11111"]
    rows[2] = "11101"
    with pytest.raises(CubError) as info:
        validate_map(GameMap(rows), Player())
    assert info.value.message == FLR_MSG


def test_validate_map_floor_next_to_space():
    rows = ["11111", "1N0 1", "10001", "11111"]
    with pytest.raises(CubError) as info:
        validate_map(GameMap(rows), Player())
    assert info.value.message == FLR_MSG


def test_validate_map_bad_char():
    rows = ["111", "1X1", "111"]
    with pytest.raises(CubError) as info:
        validate_map(GameMap(rows), Player())
    assert info.value.prefix == "Map:"
    assert info.value.message == UNX_MSG


def test_trim_then_validate():
    game_map = trim_map(["   11111", "   1E001 ", "   11111"])
    player = validate_map(game_map, Player())
    assert game_map.rows[1] == "1E001"
    assert player.angle == 0.0
from cavegen.tiles import WALL, FLOOR, STATES, is_wall, is_floor

def test_states_are_distinct_binary():
    assert set(STATES) == {0, 1}
    assert is_wall(WALL) and not is_wall(FLOOR)
    assert is_floor(FLOOR) and not is_floor(WALL)

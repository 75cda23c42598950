# Canonical cell states (1 = wall, 0 = floor, same encoding as the TSV dumps)

WALL = 1
FLOOR = 0
STATES = (FLOOR, WALL)

def is_wall(cell: int) -> bool:
    return cell == WALL

def is_floor(cell: int) -> bool:
    # Floor is the only walkable state.
    return cell == FLOOR

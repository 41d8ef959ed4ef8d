from common.config import PopulatorConfig
from tilemap.constraints import find_diagonal_seals
from tilemap.grid_classes import Point, neighbors4
from tilemap.symbols import TileSymbol, ZoneSymbol
from tilemap.walls import boundary_cells, decorate_walls, fix_diagonal_walls, synthesize_walls

from .grids import make_context


def test_restroom_gets_exactly_one_door_facing_walkway(restroom_rows):
    ctx = make_context(restroom_rows, seed=3)
    doors = synthesize_walls(ctx)

    restroom_idx = next(i for i, z in enumerate(ctx.zones) if z.symbol == ZoneSymbol.RESTROOM)
    assert list(doors) == [restroom_idx]
    door = doors[restroom_idx]

    boundary = boundary_cells(ctx.zone_grid, ctx.zones[restroom_idx])
    assert door in boundary
    for cell in boundary:
        expected = TileSymbol.FLOOR if cell == door else TileSymbol.WALL
        assert ctx.tiles.get(cell.x, cell.y) == expected

    assert any(ctx.zone_grid.symbol_at(n.x, n.y) == ZoneSymbol.WALKWAY for n in neighbors4(door))
    assert ctx.is_reserved(door)


def test_door_never_in_room_corner(restroom_rows):
    for seed in range(20):
        ctx = make_context(restroom_rows, seed=seed)
        doors = synthesize_walls(ctx)
        assert Point(4, 4) not in doors.values()


def test_zone_without_shared_boundary_gets_no_walls():
    rows = ["#####", "#BBB#", "#BBB#", "#####"]
    ctx = make_context(rows)
    assert synthesize_walls(ctx) == {}
    assert ctx.tiles.count(TileSymbol.WALL) == 14


def test_diagonal_gap_is_closed_on_top_right():
    ctx = make_context(["....", "....", "....", "...."])
    ctx.tiles.set(1, 1, TileSymbol.WALL)
    ctx.tiles.set(2, 2, TileSymbol.WALL)

    changed = fix_diagonal_walls(ctx)

    assert changed == [Point(2, 1)]
    assert ctx.tiles.get(2, 1) == TileSymbol.WALL
    assert find_diagonal_seals(ctx.tiles) == []


def test_anti_diagonal_gap_is_closed_on_top_left():
    ctx = make_context(["....", "....", "....", "...."])
    ctx.tiles.set(2, 1, TileSymbol.WALL)
    ctx.tiles.set(1, 2, TileSymbol.WALL)

    changed = fix_diagonal_walls(ctx)

    assert changed == [Point(1, 1)]
    assert find_diagonal_seals(ctx.tiles) == []


def test_diagonal_fix_skips_reserved_cell():
    ctx = make_context(["....", "....", "....", "...."])
    ctx.tiles.set(1, 1, TileSymbol.WALL)
    ctx.tiles.set(2, 2, TileSymbol.WALL)
    ctx.reserve(Point(2, 1))

    changed = fix_diagonal_walls(ctx)

    assert changed == [Point(1, 2)]
    assert ctx.tiles.get(2, 1) == TileSymbol.FLOOR
    assert ctx.tiles.get(1, 2) == TileSymbol.WALL


def test_diagonal_fix_opens_wall_when_both_cells_protected():
    ctx = make_context(["....", "....", "....", "...."])
    ctx.tiles.set(1, 1, TileSymbol.WALL)
    ctx.tiles.set(2, 2, TileSymbol.WALL)
    ctx.reserve(Point(2, 1), Point(1, 2))

    changed = fix_diagonal_walls(ctx)

    assert changed == [Point(1, 1)]
    assert ctx.tiles.get(1, 1) == TileSymbol.FLOOR
    assert ctx.is_reserved(Point(1, 1))
    assert find_diagonal_seals(ctx.tiles) == []


def test_diagonal_fix_keeps_private_room_walls():
    rows = ["######", "#WWWW#", "#WBBB#", "#WBBB#", "######"]
    ctx = make_context(rows)
    ctx.tiles.set(3, 2, TileSymbol.WALL)
    ctx.tiles.set(2, 3, TileSymbol.WALL)
    ctx.reserve(Point(2, 2), Point(3, 3))

    assert fix_diagonal_walls(ctx) == []
    assert ctx.tiles.get(3, 2) == TileSymbol.WALL
    assert ctx.tiles.get(2, 3) == TileSymbol.WALL
    assert find_diagonal_seals(ctx.tiles) == [Point(2, 2)]


def test_walkway_cells_are_never_walled():
    ctx = make_context(["....", ".WW.", ".WW.", "...."])
    ctx.tiles.set(1, 1, TileSymbol.WALL)
    ctx.tiles.set(2, 2, TileSymbol.WALL)
    fix_diagonal_walls(ctx)
    assert ctx.tiles.get(2, 1) != TileSymbol.WALL
    assert ctx.tiles.get(1, 2) != TileSymbol.WALL


def test_windows_only_on_exterior_walls():
    rows = ["######", "#....#", "#....#", "######"]
    ctx = make_context(rows, config=PopulatorConfig(window_skip_probability=0.0))

    placed = decorate_walls(ctx)

    assert placed >= 2
    windows = ctx.tiles.cells_of(TileSymbol.WINDOW)
    assert len(windows) == 2 * placed
    for p in windows:
        assert p.x in (0, 5) or p.y in (0, 3)


def test_windows_skipped_with_probability_one():
    rows = ["######", "#....#", "#....#", "######"]
    ctx = make_context(rows, config=PopulatorConfig(window_skip_probability=1.0))
    assert decorate_walls(ctx) == 0
    assert ctx.tiles.count(TileSymbol.WINDOW) == 0


def test_short_wall_runs_get_no_window():
    rows = ["##", "..", "##"]
    ctx = make_context(rows, config=PopulatorConfig(window_skip_probability=0.0))
    assert decorate_walls(ctx) == 0

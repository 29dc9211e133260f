"""Weighted rectangular tile map searched by the path finders."""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple


Coord = Tuple[int, int]


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class Map:
    """Fixed-size grid of tile weights in ``[0.0, 1.0]``.

    A weight of ``0.0`` is freely passable and ``1.0`` is closed. Tiles are
    stored row-major so tile ``id == row * columns + column``.
    """

    def __init__(
        self, columns: int, rows: int, tiles: Optional[Sequence[float]] = None
    ) -> None:
        if columns <= 0:
            raise ValueError("columns must be greater than zero")
        if rows <= 0:
            raise ValueError("rows must be greater than zero")
        if tiles is not None and len(tiles) != columns * rows:
            raise ValueError(
                f"tiles length of {len(tiles)} does not match columns * rows ({columns * rows})"
            )

        self._columns = columns
        self._rows = rows
        if tiles is None:
            self._tiles: List[float] = [0.0] * (columns * rows)
        else:
            self._tiles = [_clamp(v) for v in tiles]

        self.start_tile: Coord = (0, 0)
        self.end_tile: Coord = (0, 0)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_tiles(cls, columns: int, rows: int, tiles: Sequence[float] | None) -> "Map":
        """Create a map from a flat, pre-populated tile sequence."""

        if tiles is None:
            raise TypeError("tiles cannot be None")
        return cls(columns, rows, tiles)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Map":
        """Create a map from a list of equal-length weight rows.

        ``rows[0]`` is row ``0``; each inner sequence holds one weight per
        column.
        """

        if not rows:
            raise ValueError("rows must be greater than zero")
        columns = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != columns:
                raise ValueError(
                    f"row {index} has {len(row)} tiles, expected {columns}"
                )
        flat = [weight for row in rows for weight in row]
        return cls(columns, len(rows), flat)

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------
    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    def __len__(self) -> int:
        return len(self._tiles)

    # ------------------------------------------------------------------
    # Tile addressing
    # ------------------------------------------------------------------
    def tile_id(self, column: int, row: int) -> int:
        """Translate ``column``/``row`` into a tile id."""

        if column < 0:
            raise ValueError("column must not be negative")
        if row < 0:
            raise ValueError("row must not be negative")
        return row * self._columns + column

    def _resolve(self, args: tuple) -> int:
        """Return the tile id addressed by ``id``, ``(column, row)`` or ``position``."""

        if len(args) == 2:
            return self.tile_id(args[0], args[1])
        if len(args) != 1:
            raise TypeError("expected a tile id, a position or a column and row")
        key = args[0]
        if isinstance(key, tuple):
            x, y = key
            if x < 0:
                raise ValueError("position x coordinate must not be negative")
            if y < 0:
                raise ValueError("position y coordinate must not be negative")
            return self.tile_id(x, y)
        return key

    def _check_id(self, tile_id: int) -> None:
        # Negative ids would silently wrap with list indexing.
        if not 0 <= tile_id < len(self._tiles):
            raise IndexError(f"tile id {tile_id} is out of range for this map")

    # ------------------------------------------------------------------
    # Weights
    # ------------------------------------------------------------------
    def get_tile_weight(self, *args) -> float:
        """Return the weight of a tile.

        Accepts a tile id, a ``(x, y)`` position, or ``column, row``.
        """

        tile_id = self._resolve(args)
        self._check_id(tile_id)
        return self._tiles[tile_id]

    def set_tile_weight(self, *args) -> None:
        """Set a tile weight, clamping the value into ``[0.0, 1.0]``.

        The last argument is the value; the ones before it address the tile
        the same way :meth:`get_tile_weight` does.
        """

        if len(args) < 2:
            raise TypeError("expected a tile address and a value")
        *address, value = args
        tile_id = self._resolve(tuple(address))
        self._check_id(tile_id)
        self._tiles[tile_id] = _clamp(value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, *args) -> bool:
        """Return ``True`` if a tile id, position or column/row is on the map."""

        if len(args) == 2:
            column, row = args
        elif len(args) == 1 and isinstance(args[0], tuple):
            column, row = args[0]
        elif len(args) == 1:
            return 0 <= args[0] < len(self._tiles)
        else:
            raise TypeError("expected a tile id, a position or a column and row")
        return 0 <= column < self._columns and 0 <= row < self._rows

    def is_open(self, *args) -> bool:
        """Return ``True`` if the addressed tile is on the map and passable."""

        return self.contains(*args) and self.get_tile_weight(*args) < 1.0

    def open_map_tiles(self, position: Coord) -> Iterator[Coord]:
        """Yield the passable orthogonal neighbours of ``position``."""

        x, y = position
        for candidate in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)):
            if self.is_open(candidate):
                yield candidate

    @staticmethod
    def step_distance(a: Coord, b: Coord) -> int:
        """Minimum number of moves between ``a`` and ``b`` ignoring barriers."""

        return abs(a[0] - b[0]) + abs(a[1] - b[1])

    def __repr__(self) -> str:
        return (
            f"Map(columns={self._columns}, rows={self._rows}, "
            f"start_tile={self.start_tile}, end_tile={self.end_tile})"
        )


__all__ = ["Coord", "Map"]

import numpy as np


def is_alive_next(currently_alive, living_neighbor_count):
    """
    Conway's rule (https://en.wikipedia.org/wiki/Conway%27s_Game_of_Life#Rules)
    - Any live cell with two or three live neighbours survives.
    - Any dead cell with three live neighbours becomes a live cell.
    - All other live cells die, all other dead cells stay dead.
    """
    return (currently_alive and living_neighbor_count == 2) or living_neighbor_count == 3


class Board:
    """
    One generation of the Game of Life.

    The grid is a sequence of rows, each row a sequence of cells (True = alive).
    Rows may have different lengths. A Board never changes after construction,
    next() hands back a new one.
    """

    def __init__(self, grid=()):
        # copy into tuples so later changes to the caller's lists can't leak in
        self._grid = tuple(tuple(bool(cell) for cell in row) for row in grid)

    @classmethod
    def from_array(cls, array):
        """
        Build a Board from a 2D array, non-zero entries are alive.

        Args:
            array: anything numpy can turn into a 2D array

        Raises:
            ValueError: if the array is not 2D
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim} dimension(s)")
        return cls(array.astype(bool).tolist())

    def current_state(self):
        return self._grid

    @property
    def population(self):
        return sum(sum(row) for row in self._grid)

    def to_array(self):
        """
        Returns:
            np.ndarray: bool array of shape (rows, cols)

        Raises:
            ValueError: if the rows don't all have the same length
        """
        if not self._grid:
            return np.zeros((0, 0), dtype=bool)
        widths = {len(row) for row in self._grid}
        if len(widths) > 1:
            raise ValueError(f"Jagged board has row lengths {sorted(widths)}, cannot convert to an array")
        return np.array(self._grid, dtype=bool).reshape(len(self._grid), widths.pop())

    def count_living_neighbors(self, row, col):
        """
        Count live cells in the Moore neighbourhood of (row, col).

        Edges are not wrapped. The column window is clamped against each
        neighbour row's own length, so jagged boards never index out of range.
        """
        grid = self._grid
        if not grid or not grid[row]:
            return 0

        min_row = max(row - 1, 0)
        max_row = min(len(grid) - 1, row + 1)
        min_col = max(col - 1, 0)

        count = 0
        for neighbor_row_num in range(min_row, max_row + 1):
            neighbor_row = grid[neighbor_row_num]
            max_col = min(len(neighbor_row) - 1, col + 1)
            for neighbor_col_num in range(min_col, max_col + 1):
                current_cell = neighbor_row_num == row and neighbor_col_num == col
                if not current_cell and neighbor_row[neighbor_col_num]:
                    count += 1
        return count

    def next(self):
        # every cell reads from self only, never from the generation being built
        return Board(
            [
                is_alive_next(currently_alive, self.count_living_neighbors(row_num, col_num))
                for col_num, currently_alive in enumerate(row)
            ]
            for row_num, row in enumerate(self._grid)
        )

    def generations(self):
        # yields self first, then each following generation forever
        board = self
        while True:
            yield board
            board = board.next()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        if len(self._grid) != len(other._grid):
            return False
        return all(mine == theirs for mine, theirs in zip(self._grid, other._grid))

    def __hash__(self):
        return hash(self._grid)

    def __repr__(self):
        rows = ", ".join("[" + ", ".join("1" if cell else "0" for cell in row) + "]" for row in self._grid)
        return f"Board([{rows}])"

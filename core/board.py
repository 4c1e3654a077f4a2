"""
core/board.py

Иммутабельный снимок доски и правила ходов.

Доска хранится как плоский кортеж клеток (row-major: index = y * size + x),
поэтому равенство и хеш структурные и дешёвые. Каждый ход создаёт новую доску.
"""

from functools import lru_cache
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .utils import BOARD_SIZE, Cell, Direction, Position, in_range
from utils.error_handling import IllegalMoveError, InvalidBoardError


class Move(NamedTuple):
    """Ход: исходная клетка (x, y) и направление прыжка."""
    x: int
    y: int
    direction: Direction

    @property
    def jumped(self) -> Position:
        return self.x + self.direction.dx, self.y + self.direction.dy

    @property
    def landing(self) -> Position:
        return self.x + 2 * self.direction.dx, self.y + 2 * self.direction.dy

    def inverse(self) -> 'Move':
        """Геометрически обратный ход (из клетки приземления назад)."""
        lx, ly = self.landing
        return Move(lx, ly, self.direction.opposite())


JumpTable = Tuple[Dict[Direction, Tuple[int, int]], ...]


@lru_cache(maxsize=None)
def _jump_table(size: int) -> JumpTable:
    """
    Для каждой клетки: направление → (индекс перепрыгиваемой, индекс приземления).

    В таблицу попадают только прыжки, не выходящие за пределы доски,
    поэтому обращение за границу невозможно по построению.
    """
    table = []
    for index in range(size * size):
        y, x = divmod(index, size)
        jumps = {}
        for direction in Direction:
            lx, ly = x + 2 * direction.dx, y + 2 * direction.dy
            if in_range(lx, ly, size):
                jumped = (y + direction.dy) * size + (x + direction.dx)
                jumps[direction] = (jumped, ly * size + lx)
        table.append(jumps)
    return tuple(table)


@lru_cache(maxsize=None)
def _symmetry_maps(size: int) -> Tuple[Tuple[int, ...], ...]:
    """
    8 симметрий квадрата (4 поворота и 4 отражения) как перестановки индексов.

    new_cells[i] = cells[perm[i]].
    """
    n = size - 1
    transforms = [
        lambda x, y: (x, y),
        lambda x, y: (n - y, x),
        lambda x, y: (n - x, n - y),
        lambda x, y: (y, n - x),
        lambda x, y: (n - x, y),
        lambda x, y: (x, n - y),
        lambda x, y: (y, x),
        lambda x, y: (n - y, n - x),
    ]
    maps = []
    for transform in transforms:
        perm = [0] * (size * size)
        for y in range(size):
            for x in range(size):
                tx, ty = transform(x, y)
                perm[ty * size + tx] = y * size + x
        maps.append(tuple(perm))
    return tuple(maps)


_SYMBOLS = {cell.value: cell for cell in Cell}


class Board:
    """
    Иммутабельное представление доски.

    Хеш и количество колышков вычисляются один раз при создании.
    """
    __slots__ = ('cells', 'size', '_hash', '_count')

    def __init__(self, cells: Iterable[Cell], size: int = BOARD_SIZE):
        cells = tuple(cells)
        if len(cells) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} cells for a {size}x{size} board, got {len(cells)}"
            )
        self.cells = cells
        self.size = size
        self._hash = hash(cells)
        self._count = cells.count(Cell.FILLED)

    @classmethod
    def _derive(cls, cells: Tuple[Cell, ...], size: int, count: int) -> 'Board':
        """Быстрое создание потомка без пересчёта колышков."""
        board = cls.__new__(cls)
        board.cells = cells
        board.size = size
        board._hash = hash(cells)
        board._count = count
        return board

    @classmethod
    def english_start(cls) -> 'Board':
        """
        Стандартная английская доска: крест 7x7, угловые блоки 2x2
        вырезаны, все клетки заняты кроме центральной (32 колышка).
        """
        size = BOARD_SIZE
        center = size // 2
        cells = []
        for y in range(size):
            for x in range(size):
                if (x < 2 or x > 4) and (y < 2 or y > 4):
                    cells.append(Cell.BLOCKED)
                elif (x, y) == (center, center):
                    cells.append(Cell.EMPTY)
                else:
                    cells.append(Cell.FILLED)
        return cls(cells, size)

    @classmethod
    def from_rows(cls, rows: List[str]) -> 'Board':
        """
        Создаёт доску из строк символов: 'O' — колышек, '-' — пусто,
        ' ' — клетки нет. Короткие строки дополняются пробелами справа.
        """
        size = len(rows)
        if size == 0:
            raise InvalidBoardError("Board template is empty")
        cells = []
        for y, row in enumerate(rows):
            if len(row) > size:
                raise InvalidBoardError(
                    f"Row {y} has {len(row)} cells, board is {size}x{size}"
                )
            for symbol in row.ljust(size):
                if symbol not in _SYMBOLS:
                    raise InvalidBoardError(f"Unknown cell symbol {symbol!r} in row {y}")
                cells.append(_SYMBOLS[symbol])
        return cls(cells, size)

    @property
    def center(self) -> Position:
        return self.size // 2, self.size // 2

    def cell(self, x: int, y: int) -> Cell:
        if not in_range(x, y, self.size):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self.size}x{self.size} board")
        return self.cells[y * self.size + x]

    def is_blocked(self, x: int, y: int) -> bool:
        return self.cell(x, y) is Cell.BLOCKED

    def filled_count(self) -> int:
        """Количество колышков — O(1), посчитано при создании."""
        return self._count

    def filled_positions(self) -> Iterator[Position]:
        for index, cell in enumerate(self.cells):
            if cell is Cell.FILLED:
                y, x = divmod(index, self.size)
                yield x, y

    def _moves_at(self, index: int, table: JumpTable) -> List[Move]:
        cells = self.cells
        if cells[index] is not Cell.FILLED:
            return []
        y, x = divmod(index, self.size)
        return [
            Move(x, y, direction)
            for direction, (jumped, landing) in table[index].items()
            if cells[jumped] is Cell.FILLED and cells[landing] is Cell.EMPTY
        ]

    def legal_moves_from(self, x: int, y: int) -> List[Move]:
        """Допустимые ходы из одной клетки (каждое направление отдельно)."""
        if not in_range(x, y, self.size):
            return []
        return self._moves_at(y * self.size + x, _jump_table(self.size))

    def all_legal_moves(self) -> List[Move]:
        """Все допустимые ходы, обход по строкам, затем по столбцам."""
        table = _jump_table(self.size)
        moves = []
        for index in range(len(self.cells)):
            moves.extend(self._moves_at(index, table))
        return moves

    def is_legal(self, move: Move) -> bool:
        """Повторная проверка конкретного хода против текущей доски."""
        if not in_range(move.x, move.y, self.size):
            return False
        index = move.y * self.size + move.x
        jump = _jump_table(self.size)[index].get(move.direction)
        if jump is None:
            return False
        jumped, landing = jump
        cells = self.cells
        return (
            cells[index] is Cell.FILLED and
            cells[jumped] is Cell.FILLED and
            cells[landing] is Cell.EMPTY
        )

    def apply(self, move: Move) -> 'Board':
        """
        Возвращает новую доску после хода.

        Raises:
            IllegalMoveError: если ход недопустим (ошибка вызывающего кода)
        """
        if not self.is_legal(move):
            raise IllegalMoveError(move)
        index = move.y * self.size + move.x
        jumped, landing = _jump_table(self.size)[index][move.direction]
        cells = list(self.cells)
        cells[index] = Cell.EMPTY
        cells[jumped] = Cell.EMPTY
        cells[landing] = Cell.FILLED
        return Board._derive(tuple(cells), self.size, self._count - 1)

    def is_won(self, target: Optional[Position] = None) -> bool:
        """Остался ровно один колышек, и он стоит в целевой клетке."""
        if self._count != 1:
            return False
        x, y = target if target is not None else self.center
        return in_range(x, y, self.size) and self.cells[y * self.size + x] is Cell.FILLED

    def symmetries(self) -> List['Board']:
        """Все 8 образов доски при поворотах и отражениях."""
        cells = self.cells
        return [
            Board._derive(tuple(cells[i] for i in perm), self.size, self._count)
            for perm in _symmetry_maps(self.size)
        ]

    def canonical_key(self) -> str:
        """
        Ключ канонической формы: минимальная строка символов среди
        8 симметрий. Промежуточные доски не создаются.
        """
        symbols = self.to_string()
        return min(
            ''.join([symbols[i] for i in perm])
            for perm in _symmetry_maps(self.size)
        )

    def canonical(self) -> 'Board':
        """Каноническая форма (минимальная из 8 симметрий)."""
        key = self.canonical_key()
        return Board._derive(tuple(_SYMBOLS[s] for s in key), self.size, self._count)

    def supports_symmetry(self, target: Optional[Position] = None) -> bool:
        """
        Можно ли склеивать симметричные позиции: вырезанные клетки
        и целевая клетка должны переходить сами в себя при всех симметриях.
        """
        x, y = target if target is not None else self.center
        target_index = y * self.size + x
        blocked = [cell is Cell.BLOCKED for cell in self.cells]
        for perm in _symmetry_maps(self.size):
            if perm[target_index] != target_index:
                return False
            if any(blocked[perm[i]] != blocked[i] for i in range(len(blocked))):
                return False
        return True

    def to_matrix(self) -> List[List[str]]:
        """Матрица символов, по строке на каждый y."""
        size = self.size
        return [
            [cell.value for cell in self.cells[y * size:(y + 1) * size]]
            for y in range(size)
        ]

    def to_string(self) -> str:
        return ''.join(cell.value for cell in self.cells)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({self._count} pegs)"

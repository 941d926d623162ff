"""Chess pieces, positions and the board that holds them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterator

BOARD_SIZE = 8


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    def opponent(self) -> Color:
        """Return the other side's colour."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceType(Enum):
    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"


class GameStatus(Enum):
    WAITING = "waiting"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True, order=True)
class Position:
    """A square on the board; row 0 is Black's back rank."""

    row: int = 0
    col: int = 0

    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def to_chess_notation(self) -> str:
        """Algebraic square name, e.g. ``e4``."""
        return chr(ord("a") + self.col) + chr(ord("8") - self.row)

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass
class Move:
    """A move of ``piece`` from ``source`` to ``target``."""

    source: Position
    target: Position
    piece: Piece | None = None
    captured: Piece | None = None


_KING_DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1),
)
_ROOK_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_BISHOP_DIRECTIONS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_KNIGHT_OFFSETS = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1),
)


class Piece(ABC):
    """A chess piece; subclasses supply their movement rules."""

    piece_type: ClassVar[PieceType]
    symbol: ClassVar[str]

    def __init__(self, color: Color) -> None:
        self.color = color
        self.has_moved = False

    @abstractmethod
    def possible_moves(self, position: Position, board: Board) -> list[Position]:
        """Squares reachable from ``position``, ignoring checks."""

    def _steps(self, position: Position, board: Board, offsets) -> list[Position]:
        return [
            target
            for target in (position.offset(dr, dc) for dr, dc in offsets)
            if target.is_valid() and not board.is_occupied_by(target, self.color)
        ]

    def _slides(self, position: Position, board: Board, directions) -> list[Position]:
        moves = []
        for d_row, d_col in directions:
            for step in range(1, BOARD_SIZE):
                target = position.offset(d_row * step, d_col * step)
                if not target.is_valid() or board.is_occupied_by(target, self.color):
                    break
                moves.append(target)
                if board.is_occupied(target):
                    break
        return moves

    def __str__(self) -> str:
        return ("W" if self.color is Color.WHITE else "B") + self.symbol

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name})"


class King(Piece):
    piece_type = PieceType.KING
    symbol = "K"

    def possible_moves(self, position, board):
        return self._steps(position, board, _KING_DIRECTIONS)


class Queen(Piece):
    piece_type = PieceType.QUEEN
    symbol = "Q"

    def possible_moves(self, position, board):
        return self._slides(position, board, _KING_DIRECTIONS)


class Rook(Piece):
    piece_type = PieceType.ROOK
    symbol = "R"

    def possible_moves(self, position, board):
        return self._slides(position, board, _ROOK_DIRECTIONS)


class Bishop(Piece):
    piece_type = PieceType.BISHOP
    symbol = "B"

    def possible_moves(self, position, board):
        return self._slides(position, board, _BISHOP_DIRECTIONS)


class Knight(Piece):
    piece_type = PieceType.KNIGHT
    symbol = "N"

    def possible_moves(self, position, board):
        return self._steps(position, board, _KNIGHT_OFFSETS)


class Pawn(Piece):
    piece_type = PieceType.PAWN
    symbol = "P"

    def possible_moves(self, position, board):
        direction = -1 if self.color is Color.WHITE else 1
        moves = []
        one_step = position.offset(direction, 0)
        if one_step.is_valid() and not board.is_occupied(one_step):
            moves.append(one_step)
            if not self.has_moved:
                two_step = position.offset(2 * direction, 0)
                if two_step.is_valid() and not board.is_occupied(two_step):
                    moves.append(two_step)
        for side in (-1, 1):
            capture = position.offset(direction, side)
            if (
                capture.is_valid()
                and board.is_occupied(capture)
                and not board.is_occupied_by(capture, self.color)
            ):
                moves.append(capture)
        return moves


_PIECE_CLASSES: dict[PieceType, type[Piece]] = {
    cls.piece_type: cls for cls in (King, Queen, Rook, Bishop, Knight, Pawn)
}


def create_piece(piece_type: PieceType, color: Color) -> Piece:
    """Build a piece of the given type and colour."""
    return _PIECE_CLASSES[piece_type](color)


_BACK_RANK = (
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
)

_CELL_WIDTH = 3


class Board:
    """An 8x8 board; set up for a new game unless ``populate`` is false."""

    def __init__(self, populate: bool = True) -> None:
        self._squares: dict[Position, Piece] = {}
        if populate:
            self._set_up()

    def _set_up(self) -> None:
        for color, back_row, pawn_row in ((Color.WHITE, 7, 6), (Color.BLACK, 0, 1)):
            for col, piece_type in enumerate(_BACK_RANK):
                self.place_piece(Position(back_row, col), create_piece(piece_type, color))
            for col in range(BOARD_SIZE):
                self.place_piece(Position(pawn_row, col), create_piece(PieceType.PAWN, color))

    def __len__(self) -> int:
        return len(self._squares)

    def place_piece(self, position: Position, piece: Piece) -> None:
        if not position.is_valid():
            raise ValueError(f"position {position} is off the board")
        self._squares[position] = piece

    def remove_piece(self, position: Position) -> Piece | None:
        return self._squares.pop(position, None)

    def piece_at(self, position: Position) -> Piece | None:
        return self._squares.get(position)

    def is_occupied(self, position: Position) -> bool:
        return position in self._squares

    def is_occupied_by(self, position: Position, color: Color) -> bool:
        piece = self._squares.get(position)
        return piece is not None and piece.color is color

    def move_piece(self, source: Position, target: Position) -> Piece | None:
        """Move the piece at ``source`` to ``target``; return any captured piece."""
        piece = self._squares.pop(source, None)
        if piece is None:
            return None
        captured = self._squares.pop(target, None)
        self._squares[target] = piece
        piece.has_moved = True
        return captured

    def _sorted_items(self) -> Iterator[tuple[Position, Piece]]:
        return iter(sorted(self._squares.items(), key=lambda item: item[0]))

    def find_king(self, color: Color) -> Position | None:
        for position, piece in self._sorted_items():
            if piece.piece_type is PieceType.KING and piece.color is color:
                return position
        return None

    def positions_of(self, color: Color) -> list[Position]:
        return [pos for pos, piece in self._sorted_items() if piece.color is color]

    def render(self) -> str:
        """Draw the board as a text grid with file and rank labels."""
        border = "  +" + ("-" * _CELL_WIDTH + "+") * BOARD_SIZE
        label_pad = (_CELL_WIDTH - 1) // 2
        labels = "  |" + "".join(
            " " * label_pad + chr(ord("a") + col) + " " * (_CELL_WIDTH - 1 - label_pad) + "|"
            for col in range(BOARD_SIZE)
        )
        cell_pad = (_CELL_WIDTH - 2) // 2
        lines = [border, labels, border]
        for rank in range(BOARD_SIZE, 0, -1):
            row = BOARD_SIZE - rank
            cells = []
            for col in range(BOARD_SIZE):
                piece = self._squares.get(Position(row, col))
                text = str(piece) if piece else "  "
                cells.append(" " * cell_pad + text + " " * (_CELL_WIDTH - 2 - cell_pad) + "|")
            lines.append(f"{rank} |" + "".join(cells) + f" {rank}")
            lines.append(border)
        lines.extend([labels, border])
        return "\n".join(lines) + "\n"
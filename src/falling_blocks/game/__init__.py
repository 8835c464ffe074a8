"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- grid helpers: board constants, collision, merge and row clearing
- Piece / TetrominoType: tetromino shapes with clockwise rotation
- ScoringRules: scoring and fall-speed configuration
- TetrisGame: session state machine and command surface
- BestScoreStore: best-score persistence collaborator
"""

from .grid import COLS, ROWS, clear_full_rows, collides, empty_grid, merge
from .pieces import BASE_SHAPES, Piece, TetrominoType, rotate
from .rules import ScoringRules
from .spawn import SpawnResult, random_piece, try_spawn
from .view import ghost_cells, overlay_board
from .core import Action, GameConfig, GameState, GameStatus, TetrisGame
from .highscore import BestScoreStore

__all__ = [
    "COLS",
    "ROWS",
    "clear_full_rows",
    "collides",
    "empty_grid",
    "merge",
    "BASE_SHAPES",
    "Piece",
    "TetrominoType",
    "rotate",
    "ScoringRules",
    "SpawnResult",
    "random_piece",
    "try_spawn",
    "ghost_cells",
    "overlay_board",
    "Action",
    "GameConfig",
    "GameState",
    "GameStatus",
    "TetrisGame",
    "BestScoreStore",
]

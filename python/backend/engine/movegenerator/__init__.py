from backend.engine.movegenerator.generator import (
    apply_move,
    generate_moves,
    is_move_within_boundary,
)

__all__ = ["apply_move", "generate_moves", "is_move_within_boundary"]

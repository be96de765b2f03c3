from frontend.cli.vanilla.app import render_board, run

__all__ = ["render_board", "run"]

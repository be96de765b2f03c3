from backend.engine.gamesolver.solver import (
    PathReconstructionError,
    SearchStatus,
    Solution,
    Solver,
    Step,
    VisitRecord,
    reconstruct_path,
)

__all__ = [
    "PathReconstructionError",
    "SearchStatus",
    "Solution",
    "Solver",
    "Step",
    "VisitRecord",
    "reconstruct_path",
]

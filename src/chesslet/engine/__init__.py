"""Chess engine package: evaluation, minimax search and Qt worker bridge.

``EngineWorker`` lives in :mod:`chesslet.engine.qt_bridge` and is not
re-exported here, so the search can be used without Qt installed.
"""

from chesslet.engine.evaluation import evaluate
from chesslet.engine.minimax_search import MinimaxEngine
from chesslet.engine.search import Difficulty, IEngine, RandomSource, SearchResult

__all__ = [
    "Difficulty",
    "IEngine",
    "MinimaxEngine",
    "RandomSource",
    "SearchResult",
    "evaluate",
]

"""Turkish Dama engine (backend).

- core: board, move generation, move application, outcome, game session
- engine: minimax search with alpha-beta and the static evaluation
- api: stable JSON-oriented facade for hosts
- notation/perft/cli: move strings, node counting, terminal front end
"""

from . import core, api
from .engine import Engine, SearchResult, best_move, evaluate
from .notation import move_to_str, parse_move
from .perft import perft, perft_divide

__all__ = [
    "core","api",
    "Engine","SearchResult","best_move","evaluate",
    "move_to_str","parse_move",
    "perft","perft_divide",
]

from .adjacency import is_adjacent, char_distance
from .pool import CandidatePool
from .frontier import FrontierQueue, FrontierTask
from .validation import validate_pair, EmptyWord, LengthMismatch
from .search import ChainSearch, SearchEvent, SearchResult, SearchState, find_chain

__all__ = [
    "is_adjacent", "char_distance", "CandidatePool", "FrontierQueue", "FrontierTask",
    "validate_pair", "EmptyWord", "LengthMismatch",
    "ChainSearch", "SearchEvent", "SearchResult", "SearchState", "find_chain",
]

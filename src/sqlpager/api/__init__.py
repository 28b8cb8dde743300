from .pager import Pager, compile_query, fetch_paged

__all__ = [
    "Pager",
    "compile_query",
    "fetch_paged",
]

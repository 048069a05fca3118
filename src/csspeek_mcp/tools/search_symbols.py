"""Search stylesheet symbols across the workspace."""

from typing import Optional

from ..workspace import Workspace


def search_symbols(
    workspace: Workspace,
    query: str,
    max_results: Optional[int] = None
) -> dict:
    """Search for class and id selectors named ``query``.

    Args:
        workspace: Workspace to search
        query: Class or id name (a leading "." or "#" is ignored)
        max_results: Maximum results to return

    Returns:
        Dict with search results, class matches first, then id matches
    """
    results = workspace.search_symbols(query)
    total = len(results)
    if max_results is not None:
        results = results[:max_results]

    response = {
        "query": query,
        "result_count": len(results),
        "results": [symbol.to_dict() for symbol in results],
    }
    if total > len(results):
        response["truncated"] = True
    return response

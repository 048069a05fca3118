"""List indexed stylesheets."""

from ..workspace import Workspace


def list_stylesheets(workspace: Workspace) -> dict:
    """List all indexed stylesheets.

    Returns:
        Dict with counts and one summary per stylesheet
    """
    stylesheets = [entry.to_summary() for entry in workspace.index.entries()]

    return {
        "count": len(stylesheets),
        "symbol_count": workspace.index.symbol_count(),
        "stylesheets": stylesheets
    }

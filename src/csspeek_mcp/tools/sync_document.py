"""Document sync tools - open/change and close notifications."""

from typing import Optional

from ..document import Document, guess_language_id, normalize_uri
from ..workspace import Workspace


def sync_document(
    workspace: Workspace,
    uri: str,
    text: str,
    language_id: Optional[str] = None,
    version: int = 1
) -> dict:
    """Record the current text of an opened or changed document.

    Stylesheets are re-parsed and replace their index entry; markup
    documents are kept for later definition lookups.

    Args:
        workspace: Target workspace
        uri: Document URI (or filesystem path)
        text: Full document text
        language_id: Editor language id; guessed from the extension if omitted
        version: Document version

    Returns:
        Dict describing what was recorded
    """
    uri = normalize_uri(uri)
    language_id = language_id or guess_language_id(uri)
    if not language_id:
        return {"error": f"Cannot determine language of {uri}; pass language_id"}

    document = Document(uri=uri, language_id=language_id, text=text, version=version)
    entry = workspace.sync_document(document)

    result = {
        "uri": uri,
        "language": language_id,
        "version": version,
        "indexed": entry is not None,
    }
    if entry is not None:
        result["symbol_count"] = len(entry.symbols)
    elif workspace.is_excluded(uri):
        result["excluded"] = True

    return result


def close_document(workspace: Workspace, uri: str) -> dict:
    """Forget an open document. Indexed stylesheets stay in the index.

    Args:
        workspace: Target workspace
        uri: Document URI (or filesystem path)

    Returns:
        Dict with whether the document was open
    """
    uri = normalize_uri(uri)
    return {
        "uri": uri,
        "closed": workspace.close_document(uri),
        "still_indexed": uri in workspace.index,
    }

"""Find the selector under a cursor and its stylesheet definitions."""

from pathlib import Path
from typing import Optional, Union

from ..document import Document, Position, guess_language_id, normalize_uri, uri_to_path
from ..workspace import Workspace


def _load_document(
    workspace: Workspace,
    uri: str,
    text: Optional[str] = None,
    language_id: Optional[str] = None
) -> Union[Document, dict]:
    """Resolve the document snapshot to look in.

    Preference order: text passed by the caller, the synced snapshot, the
    file on disk.

    Returns:
        The Document, or an error dict.
    """
    if text is not None:
        return Document(uri=uri, language_id=language_id or guess_language_id(uri) or "html", text=text)

    document = workspace.get_document(uri)
    if document is not None:
        return document

    file_path = Path(uri_to_path(uri))
    try:
        content = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        return {"error": f"Document not found: {uri} ({e})"}

    return Document(uri=uri, language_id=language_id or guess_language_id(uri) or "html", text=content)


def find_selector(
    workspace: Workspace,
    uri: str,
    line: int,
    character: int,
    text: Optional[str] = None,
    language_id: Optional[str] = None
) -> dict:
    """Find the class, id or tag selector at a position.

    Args:
        workspace: Workspace to look in
        uri: Markup document URI (or filesystem path)
        line: Zero-based line
        character: Zero-based UTF-16 column
        text: Document text, if not synced
        language_id: Editor language id, if not guessable

    Returns:
        Dict with the selector (null when the cursor is not on one)
    """
    uri = normalize_uri(uri)
    document = _load_document(workspace, uri, text, language_id)
    if isinstance(document, dict):
        return document

    result = {"uri": uri, "position": {"line": line, "character": character}}
    if workspace.should_ignore(document):
        result["ignored"] = True
        result["selector"] = None
        return result

    selector = workspace.find_selector(document, Position(line=line, character=character))
    result["selector"] = selector.to_dict() if selector else None
    return result


def find_definition(
    workspace: Workspace,
    uri: str,
    line: int,
    character: int,
    text: Optional[str] = None,
    language_id: Optional[str] = None
) -> dict:
    """Find where the selector at a position is defined.

    Args:
        workspace: Workspace to look in
        uri: Markup document URI (or filesystem path)
        line: Zero-based line
        character: Zero-based UTF-16 column
        text: Document text, if not synced
        language_id: Editor language id, if not guessable

    Returns:
        Dict with the selector and its definition locations
    """
    uri = normalize_uri(uri)
    document = _load_document(workspace, uri, text, language_id)
    if isinstance(document, dict):
        return document

    result = {"uri": uri, "position": {"line": line, "character": character}}
    if workspace.should_ignore(document):
        result.update({"ignored": True, "selector": None, "result_count": 0, "definitions": []})
        return result

    selector, locations = workspace.find_definition(document, Position(line=line, character=character))
    result.update({
        "selector": selector.to_dict() if selector else None,
        "result_count": len(locations),
        "definitions": [loc.to_dict() for loc in locations],
    })
    return result

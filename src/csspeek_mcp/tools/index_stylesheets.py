"""Index stylesheets tool - discover, read, extract, index."""

from pathlib import Path
from typing import Optional

from ..config import Settings
from ..stylesheet import STYLESHEET_EXTENSIONS
from ..workspace import Workspace


# File patterns to skip, on top of the peek_to_exclude setting
SKIP_PATTERNS = [
    ".git/", ".hg/", ".svn/",
    "__pycache__/", "venv/", ".venv/", ".tox/",
    ".min.css",
]

# Directories searched first when a folder has too many stylesheets
PRIORITY_DIRS = ["src/", "styles/", "css/", "scss/", "assets/", "static/"]


def should_skip_file(path: str, settings: Optional[Settings] = None) -> bool:
    """Check if file should be skipped based on path patterns."""
    normalized = path.replace("\\", "/")
    for pattern in SKIP_PATTERNS:
        if pattern in normalized:
            return True
    if settings is not None and settings.is_excluded(normalized):
        return True
    return False


def discover_stylesheets(
    folder_path: Path,
    settings: Optional[Settings] = None,
    max_files: int = 500,
    max_size: int = 1024 * 1024,  # 1MB
) -> list[Path]:
    """Discover stylesheet files in a local folder.

    Args:
        folder_path: Root folder to scan
        settings: Settings whose ``peek_to_exclude`` patterns are applied
        max_files: Maximum number of files to index
        max_size: Maximum file size in bytes

    Returns:
        List of Path objects for stylesheet files
    """
    files = []

    for file_path in folder_path.rglob("*"):
        if not file_path.is_file():
            continue

        try:
            rel_path = file_path.relative_to(folder_path).as_posix()
        except ValueError:
            continue

        if should_skip_file(rel_path, settings):
            continue

        if file_path.suffix.lower() not in STYLESHEET_EXTENSIONS:
            continue

        try:
            if file_path.stat().st_size > max_size:
                continue
        except OSError:
            continue

        files.append(file_path)

    def priority_key(file_path: Path) -> tuple:
        rel_path = file_path.relative_to(folder_path).as_posix()
        for i, prefix in enumerate(PRIORITY_DIRS):
            if rel_path.startswith(prefix):
                return (i, rel_path.count("/"), rel_path)
        return (len(PRIORITY_DIRS), rel_path.count("/"), rel_path)

    # Stable order so index iteration order does not depend on the filesystem
    files.sort(key=priority_key)
    return files[:max_files]


def index_stylesheets(
    workspace: Workspace,
    path: Optional[str] = None,
    files: Optional[list[str]] = None,
    max_files: int = 500,
) -> dict:
    """Index stylesheets from a folder and/or an explicit file list.

    Args:
        workspace: Workspace whose index receives the stylesheets
        path: Folder to scan for .css/.scss/.less files
        files: Explicit stylesheet paths (not filtered by exclusions)
        max_files: Maximum number of files discovered in ``path``

    Returns:
        Dict with indexing results
    """
    if not path and not files:
        return {"success": False, "error": "Provide a folder path or a list of stylesheet files"}

    to_load: list[Path] = []
    note = None
    folder_path = None

    if path:
        folder_path = Path(path).expanduser().resolve()

        if not folder_path.exists():
            return {"success": False, "error": f"Folder not found: {path}"}

        if not folder_path.is_dir():
            return {"success": False, "error": f"Path is not a directory: {path}"}

        discovered = discover_stylesheets(folder_path, workspace.settings, max_files=max_files)
        if len(discovered) >= max_files:
            note = f"Folder has many stylesheets; indexed first {max_files}"
        to_load.extend(discovered)

    for file in files or []:
        file_path = Path(file).expanduser().resolve()
        if file_path not in to_load:
            to_load.append(file_path)

    if not to_load:
        return {"success": False, "error": "No stylesheets found"}

    entries, warnings = workspace.load_stylesheets(to_load)

    languages: dict[str, int] = {}
    for entry in entries:
        language = entry.document.language_id
        languages[language] = languages.get(language, 0) + 1

    result = {
        "success": bool(entries),
        "file_count": len(entries),
        "symbol_count": sum(len(e.symbols) for e in entries),
        "languages": languages,
        "files": [e.uri for e in entries[:20]],  # Limit files in response
    }

    if folder_path is not None:
        result["folder_path"] = str(folder_path)

    if not entries:
        result["error"] = "No stylesheets could be read"

    if warnings:
        result["warnings"] = warnings

    if note:
        result["note"] = note

    return result

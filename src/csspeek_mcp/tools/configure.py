"""Update workspace settings."""

from typing import Optional

from ..config import Settings
from ..workspace import Workspace


def configure(workspace: Workspace, settings: Optional[dict] = None) -> dict:
    """Apply (partial) settings. Unspecified settings keep their value.

    Args:
        workspace: Workspace to configure
        settings: Settings dict (snake_case or camelCase keys)

    Returns:
        Dict with the effective settings
    """
    try:
        updated = Settings.from_dict(settings, base=workspace.settings)
    except ValueError as e:
        return {"success": False, "error": str(e)}

    workspace.update_settings(updated)
    return {"success": True, "settings": updated.to_dict()}

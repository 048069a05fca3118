"""MCP server for csspeek-mcp."""

import asyncio
import json
import logging
import os
import sys
from pathlib import Path

from mcp.server import Server
from mcp.types import Tool, TextContent

from .config import Settings
from .workspace import Workspace
from .tools.configure import configure
from .tools.find_definition import find_definition, find_selector
from .tools.index_stylesheets import index_stylesheets
from .tools.list_stylesheets import list_stylesheets
from .tools.search_symbols import search_symbols
from .tools.sync_document import close_document, sync_document


logger = logging.getLogger(__name__)

# Create server
server = Server("csspeek-mcp")

# The workspace every tool call operates on
workspace = Workspace(settings=Settings.from_env())


_POSITION_PROPERTIES = {
    "uri": {
        "type": "string",
        "description": "Markup document URI or filesystem path"
    },
    "line": {
        "type": "integer",
        "description": "Zero-based line of the cursor"
    },
    "character": {
        "type": "integer",
        "description": "Zero-based column of the cursor (UTF-16 code units)"
    },
    "text": {
        "type": "string",
        "description": "Document text. Optional when the document was synced or exists on disk."
    },
    "language_id": {
        "type": "string",
        "description": "Editor language id (html, vue, javascriptreact, ...). Guessed from the extension when omitted."
    }
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="index_stylesheets",
            description="Index stylesheets (.css, .scss, .less) from a local folder and/or an explicit list of files. Extracts every selector so definitions can be found.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Folder to scan (absolute or relative, supports ~ for home directory)"
                    },
                    "files": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Stylesheet file paths to index"
                    },
                    "max_files": {
                        "type": "integer",
                        "description": "Maximum number of stylesheets discovered in the folder",
                        "default": 500
                    }
                }
            }
        ),
        Tool(
            name="sync_document",
            description="Record the current text of an opened or changed document. Stylesheets are re-indexed; markup documents become available for definition lookups.",
            inputSchema={
                "type": "object",
                "properties": {
                    "uri": {
                        "type": "string",
                        "description": "Document URI or filesystem path"
                    },
                    "text": {
                        "type": "string",
                        "description": "Full document text"
                    },
                    "language_id": {
                        "type": "string",
                        "description": "Editor language id. Guessed from the extension when omitted."
                    },
                    "version": {
                        "type": "integer",
                        "description": "Document version",
                        "default": 1
                    }
                },
                "required": ["uri", "text"]
            }
        ),
        Tool(
            name="close_document",
            description="Forget a synced document. Indexed stylesheets remain searchable.",
            inputSchema={
                "type": "object",
                "properties": {
                    "uri": {
                        "type": "string",
                        "description": "Document URI or filesystem path"
                    }
                },
                "required": ["uri"]
            }
        ),
        Tool(
            name="configure",
            description="Update settings: support_tags, peek_from_languages, peek_to_exclude. Unspecified settings keep their value.",
            inputSchema={
                "type": "object",
                "properties": {
                    "settings": {
                        "type": "object",
                        "description": "Settings to change (snake_case or camelCase keys)"
                    }
                },
                "required": ["settings"]
            }
        ),
        Tool(
            name="find_selector",
            description="Get the CSS selector (class, id or tag name) under a cursor position in a markup document.",
            inputSchema={
                "type": "object",
                "properties": _POSITION_PROPERTIES,
                "required": ["uri", "line", "character"]
            }
        ),
        Tool(
            name="find_definition",
            description="Go to definition: find the selector under a cursor position in a markup document and return where indexed stylesheets define it.",
            inputSchema={
                "type": "object",
                "properties": _POSITION_PROPERTIES,
                "required": ["uri", "line", "character"]
            }
        ),
        Tool(
            name="search_symbols",
            description="Search indexed stylesheets for class and id selectors with the given name. Class matches come first, then id matches.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Class or id name (a leading '.' or '#' is ignored)"
                    },
                    "max_results": {
                        "type": "integer",
                        "description": "Maximum number of results to return"
                    }
                },
                "required": ["query"]
            }
        ),
        Tool(
            name="list_stylesheets",
            description="List indexed stylesheets with their symbol counts.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    arguments = arguments or {}

    try:
        if name == "index_stylesheets":
            result = index_stylesheets(
                workspace,
                path=arguments.get("path"),
                files=arguments.get("files"),
                max_files=arguments.get("max_files", 500)
            )
        elif name == "sync_document":
            result = sync_document(
                workspace,
                uri=arguments["uri"],
                text=arguments["text"],
                language_id=arguments.get("language_id"),
                version=arguments.get("version", 1)
            )
        elif name == "close_document":
            result = close_document(workspace, uri=arguments["uri"])
        elif name == "configure":
            result = configure(workspace, settings=arguments.get("settings"))
        elif name == "find_selector":
            result = find_selector(
                workspace,
                uri=arguments["uri"],
                line=arguments["line"],
                character=arguments["character"],
                text=arguments.get("text"),
                language_id=arguments.get("language_id")
            )
        elif name == "find_definition":
            result = find_definition(
                workspace,
                uri=arguments["uri"],
                line=arguments["line"],
                character=arguments["character"],
                text=arguments.get("text"),
                language_id=arguments.get("language_id")
            )
        elif name == "search_symbols":
            result = search_symbols(
                workspace,
                query=arguments["query"],
                max_results=arguments.get("max_results")
            )
        elif name == "list_stylesheets":
            result = list_stylesheets(workspace)
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


def load_initial_stylesheets():
    """Index the stylesheets named in ``CSS_PEEK_STYLESHEETS`` before serving.

    The variable holds comma-separated files and/or folders.
    """
    value = os.environ.get("CSS_PEEK_STYLESHEETS", "")
    paths = [p.strip() for p in value.split(",") if p.strip()]
    if not paths:
        return

    files = [p for p in paths if not Path(p).expanduser().is_dir()]
    folders = [p for p in paths if Path(p).expanduser().is_dir()]

    for folder in folders:
        result = index_stylesheets(workspace, path=folder)
        logger.info("Indexed %s: %s", folder, result.get("file_count", result.get("error")))
    if files:
        result = index_stylesheets(workspace, files=files)
        logger.info("Indexed %d stylesheet files", result.get("file_count", 0))


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    load_initial_stylesheets()

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    # stdout carries the MCP stream
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get("CSS_PEEK_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run_server())


if __name__ == "__main__":
    main()

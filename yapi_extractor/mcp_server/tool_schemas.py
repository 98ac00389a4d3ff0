"""MCP tool schemas (list_tools) for the YApi extraction service."""

from __future__ import annotations

from typing import List

from mcp.types import Tool


async def build_tools() -> List[Tool]:
    return [
        Tool(
            name="ping",
            description=(
                "Health check - Verify service availability. "
                "Returns server status, current timestamp and whether a YApi session is currently held."
            ),
            inputSchema={"type": "object", "properties": {}},
        ),
        Tool(
            name="extract_yapi_interface",
            description=(
                "Extraction - Fetch a YApi interface's response JSON Schema and return it together with a "
                "generation prompt. "
                "WORKFLOW: Call this first with the interface id. Follow the returned 'prompt' to generate "
                "mockData and/or typeDefinitions yourself; the prompt also tells you which save tools to call next. "
                "Returns: interfaceId, projectId, interfaceName, method, path, schemas.response (business data "
                "schema without the code/msg envelope), prompt, shouldSaveFiles, outputDir."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "interfaceId": {
                        "type": "string",
                        "description": (
                            "YApi interface id taken from the interface URL, e.g. 9084 in "
                            "http://your-yapi-server:3000/project/63/interface/api/9084"
                        ),
                    },
                    "generateType": {
                        "type": "string",
                        "enum": ["mock", "types", "both"],
                        "description": (
                            "What to generate: 'mock' for JSON mock data only, 'types' for TypeScript type "
                            "definitions only, 'both' for both. Choose from the user's request."
                        ),
                        "default": "both",
                    },
                },
                "required": ["interfaceId"],
            },
        ),
        Tool(
            name="save_generated_files",
            description=(
                "Persistence - Save generated mock data and TypeScript type definitions as local files. "
                "Writes {interfaceId}-mock.json and {interfaceId}-types.ts into the configured output directory. "
                "Either field may be omitted; only the provided artifacts are written."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "interfaceId": {
                        "type": "string",
                        "description": "Interface id, used as the file name prefix.",
                    },
                    "mockData": {
                        "type": "string",
                        "description": "Mock data as a JSON string.",
                    },
                    "typeDefinitions": {
                        "type": "string",
                        "description": "TypeScript type definitions as a string.",
                    },
                },
                "required": ["interfaceId"],
            },
        ),
        Tool(
            name="save_advanced_mock",
            description=(
                "Registration - Save mock data to YApi as an advanced mock case of the interface. "
                "The server wraps mockData as {code: 200, msg: '', data: mockData} and appends a timestamp to "
                "the name so earlier cases are never overwritten."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "interfaceId": {
                        "type": "string",
                        "description": "YApi interface id.",
                    },
                    "projectId": {
                        "type": "string",
                        "description": "YApi project id (projectId from extract_yapi_interface).",
                    },
                    "name": {
                        "type": "string",
                        "description": "Mock case name, usually the interface name.",
                    },
                    "mockData": {
                        "type": "string",
                        "description": (
                            "The data part of the mock as a JSON string, without code and msg."
                        ),
                    },
                },
                "required": ["interfaceId", "projectId", "name", "mockData"],
            },
        ),
    ]

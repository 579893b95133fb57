"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "unitcheck report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["suite", "total", "passed", "failed", "duration_s"],
            "properties": {
                "suite": {"type": "string"},
                "total": {"type": "integer"},
                "passed": {"type": "integer"},
                "failed": {"type": "integer"},
                "duration_s": {"type": "number"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "status", "duration_ms", "outcomes"],
                "properties": {
                    "name": {"type": "string"},
                    "description": {"type": "string"},
                    "status": {"type": "string", "enum": ["passed", "failed"]},
                    "duration_ms": {"type": "number"},
                    "outcomes": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["kind", "passed"],
                            "properties": {
                                "kind": {"type": "string"},
                                "passed": {"type": "boolean"},
                                "message": {"type": ["string", "null"]},
                                "error_kind": {"type": ["string", "null"]},
                            },
                        },
                    },
                },
            },
        },
    },
}

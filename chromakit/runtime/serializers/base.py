# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

import json
from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def dump_json(data: dict, format: SerializerFormat) -> str:
    """Compact JSON, or indented for JSON_PRETTY."""
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

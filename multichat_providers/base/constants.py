"""Base shared constants for the normalization layer.

Central location to avoid scattering wire literals and limits.

Security
--------
This module contains only generic sentinel strings and numeric defaults.
There are no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# SSE framing
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "data: [DONE]"

# Response bodies of failed HTTP calls are cut to this many characters
HTTP_ERROR_BODY_LIMIT = 500

JSON_CONTENT_TYPE = "application/json"

"""Utility for logging upstream API requests in debug mode or when SL_LOG_REQUESTS is set."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

_SENSITIVE_PARAMS = {"key", "apikey"}


def should_log_requests(debug: bool = False) -> bool:
    """Check if request logging is enabled by the debug setting or SL_LOG_REQUESTS."""
    return debug or os.getenv("SL_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact the API key and similar secrets from query parameters."""
    return {k: "***REDACTED***" if k.lower() in _SENSITIVE_PARAMS else v for k, v in params.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    proxy: str | None = None,
    debug: bool = False,
) -> None:
    """Log API request details if request logging is enabled.

    Args:
        method: HTTP method.
        url: Request URL.
        params: Query parameters; the API key is redacted.
        proxy: Proxy URL the request is routed through, if any.
        debug: Debug setting of the caller.
    """
    if not should_log_requests(debug):
        return

    safe_params = _redact_sensitive_params(params) if params else None
    log_parts = [f"{method} {_build_url_with_params(url, safe_params)}"]
    if proxy:
        log_parts.append(f"Proxy: {proxy}")
    if safe_params:
        log_parts.append(f"Params: {json.dumps(safe_params, indent=2, sort_keys=True)}")

    logger.info("API Request:\n" + "\n".join(log_parts))

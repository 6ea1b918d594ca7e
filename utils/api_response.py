"""
API response helpers.

Resources are returned as bare JSON documents; errors share one shape:

    Error:    {"success": false, "error": "Missing required field: phone"}

Usage:
    from utils.api_response import api_success, api_error, api_no_content

    return api_success(agency, status=201)
    return api_error('Agency not found', status=404)
"""

from flask import jsonify
from typing import Any


def api_success(data: Any, status: int = 200) -> tuple:
    """
    Build a success JSON response.

    Args:
        data: Serializable document or list of documents.
        status: HTTP status code (default 200).

    Returns:
        Tuple of (Response, status_code)
    """
    return jsonify(data), status


def api_no_content() -> tuple:
    """Empty 204 response used by delete endpoints."""
    return '', 204


def api_error(error: str, status: int = 400, **extra_fields: Any) -> tuple:
    """
    Build a standardized error JSON response.

    Args:
        error: Error message.
        status: HTTP status code (default 400).
        **extra_fields: Additional top-level fields.

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': False, 'error': error}

    if extra_fields:
        response.update(extra_fields)

    return jsonify(response), status

# cmc_api/results.py
"""Uniform success/failure envelopes returned by every endpoint function.

Success: {"success": True, "data": <body>, "status": <code>}
Failure: {"success": False, "error": {"message": ..., "response": <body>, "status": <code>}}

"response" and "status" are only present in a failure when the provider
actually answered, so transport errors carry just the message.
"""
from typing import Dict, Any
import requests

def response_body(resp: requests.Response) -> Any:
    """Parsed JSON body, the raw text when it isn't JSON, or None when empty."""
    try:
        return resp.json()
    except ValueError:
        return resp.text or None

def success_result(resp: requests.Response) -> Dict[str, Any]:
    return {
        "success": True,
        "data": response_body(resp),
        "status": resp.status_code,
    }

def failure_result(exc: requests.RequestException) -> Dict[str, Any]:
    error: Dict[str, Any] = {"message": str(exc)}
    resp = exc.response
    if resp is not None:
        body = response_body(resp)
        if body is not None:
            error["response"] = body
        error["status"] = resp.status_code
    return {"success": False, "error": error}

def is_success(result: Dict[str, Any]) -> bool:
    return bool(result.get("success"))

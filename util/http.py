"""
util/http.py

Tiny HTTP helper that issues one request attempt.
- Timeout can be configured via HTTP_TIMEOUT env (seconds); unset means the
  requests default (no timeout)
- Network errors are raised as requests.RequestException, never retried here
"""

import os

import requests


def _env_timeout():
    raw = os.getenv("HTTP_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def send_request(method, url, headers=None, body=None, timeout=None):
    """Send a single HTTP request and return the requests.Response.

    The body is passed through untouched; status codes are not checked.
    The response body is not downloaded until .text is read, so an attempt
    that is retried can be closed unread.
    """
    if timeout is None:
        timeout = _env_timeout()
    data = body.encode("utf-8") if isinstance(body, str) else body
    return requests.request(
        method,
        url,
        headers=headers or {},
        data=data,
        timeout=timeout,
        stream=True,
    )

"""Rich-text alert messages posted to a chat robot webhook."""

from __future__ import annotations

import http.client
import json
import urllib.request
from http import HTTPStatus
from typing import Any, Optional, Sequence

from tonekit.env import environment

ALERT_TITLE = "告警"
DEFAULT_HTTP_TIMEOUT = 3
JSON_CONTENT_TYPE = "application/json"


class _DeliveryError(Exception):
    pass


def build_post_message(title: str, lines: Sequence[str]) -> dict[str, Any]:
    """Build a rich-text message with an empty line between consecutive lines."""
    content: list[list[dict[str, str]]] = []
    for position, line in enumerate(lines):
        if position:
            content.append([{"tag": "text", "text": ""}])
        content.append([{"tag": "text", "text": line}])
    return {
        "msg_type": "post",
        "content": {"post": {"zh_cn": {"title": title, "content": content}}},
    }


def _post_json(url: str, payload: Any) -> bytes:
    body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    request = urllib.request.Request(
        url, data=body, headers={"Content-Type": JSON_CONTENT_TYPE}, method="POST"
    )
    with urllib.request.urlopen(request, timeout=DEFAULT_HTTP_TIMEOUT) as response:
        if response.status != HTTPStatus.OK:
            raise _DeliveryError(f"http status code: {response.status},url: {url}")
        return response.read()


def send_post_msg(robot_url: str, title: str, lines: Sequence[str]) -> Optional[bytes]:
    """Post the message; return the response body, or None when skipped or failed."""
    if not robot_url or not lines:
        return None
    try:
        return _post_json(robot_url, build_post_message(title, lines))
    except (OSError, ValueError, http.client.HTTPException, _DeliveryError):
        return None


def send_alert(robot_url: str, name: str, text: str) -> Optional[bytes]:
    """Post an alert titled with the current environment."""
    return send_post_msg(
        robot_url,
        f"[{environment()}] {ALERT_TITLE}",
        [f"name: {name}", f"text: {text}"],
    )
"""HTTP client for the blog JSON API, used by the assistant actions."""

import logging
from typing import Any, Dict, List, Optional

import requests

from blog.authentication import SERVER_KEY_HEADER

logger = logging.getLogger(__name__)

SAFE_METHODS = ("GET", "HEAD", "OPTIONS")


class ApiError(Exception):
    """Non-2xx answer from the blog API."""

    def __init__(self, status: int, message: str):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message


class BlogApiClient:
    """
    Talk to the blog API the way a browser would.

    One `requests.Session` keeps the session and CSRF cookies between
    calls. When `server_key` is set it is sent on update and delete calls
    so trusted automation can act on any post.
    """

    def __init__(self, base_url: str, *, session: Optional[requests.Session] = None,
                 server_key: Optional[str] = None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.server_key = server_key
        self.timeout = timeout
        self._csrf_token: Optional[str] = None

    # Accounts

    def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        return self._request("POST", "auth/register/", json={"name": name, "email": email, "password": password})

    def log_in(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "auth/login/", json={"email": email, "password": password})
        self._csrf_token = data.get("csrfToken") or self._csrf_token
        return data.get("user") or {}

    def log_out(self) -> None:
        self._request("POST", "auth/logout/")
        self._csrf_token = None

    # Posts

    def list_posts(self) -> List[Dict[str, Any]]:
        return self._request("GET", "posts/", expect="posts")

    def get_post(self, post_id: str) -> Dict[str, Any]:
        return self._request("GET", f"posts/{post_id}/", expect="post")

    def get_post_at(self, position: int) -> Dict[str, Any]:
        return self._request("GET", f"posts/at/{int(position)}/", expect="post")

    def create_post(self, title: str, content: str) -> Dict[str, Any]:
        return self._request("POST", "posts/", json={"title": title, "content": content}, expect="post")

    def update_post(self, post_id: str, *, title: Optional[str] = None,
                    content: Optional[str] = None) -> Dict[str, Any]:
        body = {key: value for key, value in (("title", title), ("content", content)) if value}
        return self._request("PUT", f"posts/{post_id}/", json=body, privileged=True, expect="post")

    def delete_post(self, post_id: str) -> None:
        self._request("DELETE", f"posts/{post_id}/", privileged=True)

    # Likes and comments

    def toggle_like(self, post_id: str) -> Dict[str, Any]:
        return self._request("POST", f"posts/{post_id}/like/")

    def like_status(self, post_id: str) -> Dict[str, Any]:
        return self._request("GET", f"posts/{post_id}/like/")

    def list_comments(self, post_id: str) -> List[Dict[str, Any]]:
        return self._request("GET", f"posts/{post_id}/comments/", expect="comments")

    def create_comment(self, post_id: str, content: str) -> Dict[str, Any]:
        return self._request("POST", f"posts/{post_id}/comments/", json={"content": content}, expect="comment")

    # Transport

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path.lstrip('/')}"

    def _headers(self, method: str, privileged: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if method not in SAFE_METHODS:
            token = self.session.cookies.get("csrftoken") or self._csrf_token
            if token:
                headers["X-CSRFToken"] = token
            # Django checks the referer of unsafe requests made over HTTPS.
            headers["Referer"] = f"{self.base_url}/"
        if privileged and self.server_key:
            headers[SERVER_KEY_HEADER] = self.server_key
        return headers

    def _request(self, method: str, path: str, *, json: Optional[Dict[str, Any]] = None,
                 privileged: bool = False, expect: Optional[str] = None) -> Any:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        response = self.session.request(
            method,
            url,
            json=json,
            headers=self._headers(method, privileged),
            timeout=self.timeout,
        )
        data = self._decode(response)
        if not response.ok:
            data = data or {}
            message = data.get("error") or data.get("message") or response.reason or "Unknown error"
            logger.info("%s %s failed with %s: %s", method, url, response.status_code, message)
            raise ApiError(response.status_code, message)
        if data is None or (expect is not None and expect not in data):
            logger.warning("%s %s answered %s with an unexpected body", method, url, response.status_code)
            raise ApiError(response.status_code, "Unexpected response from the blog API")
        return data if expect is None else data[expect]

    @staticmethod
    def _decode(response) -> Optional[Dict[str, Any]]:
        """JSON object body, or None when the body is not one."""
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

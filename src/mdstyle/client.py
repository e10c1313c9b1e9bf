"""HTTP client for a running mdstyle server, built on httpx."""
from __future__ import annotations

from typing import Any

import httpx

from mdstyle.config import API_KEY_HEADER
from mdstyle.errors import NetworkError, RequestTimeoutError, error_from_status_code
from mdstyle.model import OutputFormat, RenderOptions

DEFAULT_TIMEOUT = 30.0


class ApiClient:
    """Thin wrapper around :mod:`httpx` that maps errors into mdstyle exceptions."""

    def __init__(self, endpoint: str, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(
            base_url=endpoint.rstrip("/"),
            headers={API_KEY_HEADER: api_key},
            timeout=httpx.Timeout(timeout),
        )

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request and return the response.

        Raises an mdstyle error on non-2xx status or transport failure.
        """
        try:
            resp = self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        if resp.status_code >= 300:
            try:
                body = resp.json()
            except ValueError:
                body = {}
            msg = body.get("error") if isinstance(body, dict) else None
            raise error_from_status_code(
                resp.status_code,
                msg or f"HTTP {resp.status_code}",
                raw=body if isinstance(body, dict) else None,
            )
        return resp

    def _data(self, method: str, path: str, **kwargs: Any) -> Any:
        return self._request(method, path, **kwargs).json().get("data")

    def health(self) -> bool:
        """True when the server answers its health check."""
        try:
            resp = self._request("GET", "/api/health")
        except (NetworkError, RequestTimeoutError):
            return False
        return resp.json().get("status") == "ok"

    def render(
        self,
        markdown: str,
        theme_id: str | None = None,
        output_format: OutputFormat | str = OutputFormat.WECHAT,
        options: RenderOptions | None = None,
    ) -> dict[str, Any]:
        """Render remotely; returns ``{html, css?, readingTime}``."""
        options = options or RenderOptions()
        payload: dict[str, Any] = {
            "markdown": markdown,
            "format": str(output_format),
            "options": {
                "isMacCodeBlock": options.is_mac_code_block,
                "codeTheme": str(options.code_theme),
            },
        }
        if theme_id:
            payload["themeId"] = theme_id
        return self._data("POST", "/api/render", json=payload)

    def list_themes(self) -> list[dict[str, str]]:
        return self._data("GET", "/api/themes")

    def upload_theme(self, name: str, css: str) -> dict[str, str]:
        files = {"file": (f"{name}.css", css.encode("utf-8"), "text/css")}
        return self._data("POST", "/api/themes", files=files, data={"name": name})

    def download_theme(self, theme_id: str) -> str:
        return self._request("GET", f"/api/themes/{theme_id}").text

    def delete_theme(self, theme_id: str) -> dict[str, Any]:
        return self._data("DELETE", f"/api/themes/{theme_id}")

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

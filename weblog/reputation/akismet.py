"""Akismet comment reputation client."""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from ..config import ReputationConfig
from ..errors import ClassificationError, ReportError
from .base import ReputationClient

logger = logging.getLogger(__name__)


class AkismetClient(ReputationClient):
    """Akismet REST client bound to one API key and site.

    Owns a single ``httpx.Client`` (and its connection pool) for its whole
    lifetime; callers replace the client rather than reconfigure it.
    """

    def __init__(
        self,
        cfg: ReputationConfig,
        api_key: str | None,
        site_url: str,
        transport: httpx.BaseTransport | None = None,
    ):
        if not api_key:
            raise ValueError("Missing Akismet API key")
        self.cfg = cfg
        self.api_key = api_key
        self.site_url = site_url
        self._client = httpx.Client(
            base_url=cfg.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(cfg.timeout_seconds),
            headers={"User-Agent": cfg.user_agent},
            trust_env=cfg.trust_env,
            transport=transport,
        )

    def check(self, params: Mapping[str, str | None]) -> bool:
        try:
            resp = self._post("comment-check", params)
        except httpx.HTTPError as exc:
            raise ClassificationError(f"Akismet comment-check failed: {exc}") from exc

        body = resp.text.strip()
        if resp.status_code == 200 and body == "true":
            return True
        if resp.status_code == 200 and body == "false":
            return False
        raise ClassificationError(_unexpected_response("comment-check", resp))

    def submit_spam(self, params: Mapping[str, str | None]) -> None:
        try:
            resp = self._post("submit-spam", params)
        except httpx.HTTPError as exc:
            raise ReportError(f"Akismet submit-spam failed: {exc}") from exc
        if resp.status_code != 200:
            raise ReportError(_unexpected_response("submit-spam", resp))

    def verify_key(self) -> bool:
        """Return True if the service accepts the configured key for this site."""
        try:
            resp = self._post("verify-key", {"key": self.api_key})
        except httpx.HTTPError as exc:
            raise ClassificationError(f"Akismet verify-key failed: {exc}") from exc
        return resp.status_code == 200 and resp.text.strip() == "valid"

    def close(self) -> None:
        self._client.close()

    def _post(self, method: str, params: Mapping[str, str | None]) -> httpx.Response:
        data = {"api_key": self.api_key, "blog": self.site_url}
        data.update({key: value for key, value in params.items() if value is not None})
        logger.debug("Akismet %s request", method)
        return self._client.post(method, data=data)


def _unexpected_response(method: str, resp: httpx.Response) -> str:
    help_text = resp.headers.get("X-akismet-debug-help")
    detail = help_text or resp.text.strip()[:200] or "empty body"
    return f"Akismet {method} returned HTTP {resp.status_code}: {detail}"

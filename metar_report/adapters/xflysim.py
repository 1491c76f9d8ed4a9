from __future__ import annotations

import logging

import requests

from metar_report.adapters.base import MetarResponse, response_from_envelope
from metar_report.config import DEFAULT_TIMEOUT_S, DEFAULT_URL_TEMPLATE
from metar_report.errors import FetchError

logger = logging.getLogger(__name__)


class XFlysimMetarAdapter:
    def __init__(self, url_template: str = DEFAULT_URL_TEMPLATE, timeout_s: float = DEFAULT_TIMEOUT_S) -> None:
        self.url_template = url_template
        self.timeout_s = timeout_s

    def _fetch(self, icao: str) -> dict:
        url = self.url_template.format(icao=icao)
        try:
            resp = requests.get(url, timeout=self.timeout_s)
            resp.raise_for_status()
            logger.debug("GET %s -> %s", url, resp.status_code)
            return resp.json()
        except requests.RequestException as exc:
            raise FetchError(icao, str(exc)) from exc
        except ValueError as exc:
            raise FetchError(icao, f"invalid JSON body: {exc}") from exc

    def fetch_metar(self, icao: str) -> MetarResponse:
        return response_from_envelope(icao, self._fetch(icao), source="LIVE")

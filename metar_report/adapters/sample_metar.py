from __future__ import annotations

import json
from pathlib import Path

from metar_report.adapters.base import MetarResponse, response_from_envelope
from metar_report.errors import FetchError


class SampleMetarAdapter:
    def __init__(self, samples_dir: Path) -> None:
        self.samples_dir = samples_dir

    def fetch_metar(self, icao: str) -> MetarResponse:
        path = self.samples_dir / f"metar_{icao}.json"
        try:
            envelope = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FetchError(icao, f"no sample at {path}") from exc
        except json.JSONDecodeError as exc:
            raise FetchError(icao, f"invalid sample {path}: {exc}") from exc
        return response_from_envelope(icao, envelope, source="SAMPLE")

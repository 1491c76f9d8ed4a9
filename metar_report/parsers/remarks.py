from __future__ import annotations

NO_REMARK = "无 RMK 信息"
RMK_MARKER = "RMK"


def extract_remarks(raw: str) -> str:
    """Return the free text following the first ``RMK`` marker.

    An empty remark section yields ``""``; only a report without ``RMK`` at
    all yields :data:`NO_REMARK`.
    """
    index = raw.find(RMK_MARKER)
    if index == -1:
        return NO_REMARK
    return raw[index + len(RMK_MARKER) :].strip()

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

RPC_METHOD = "aria2.changeGlobalOption"
CORRELATION_ID = "cron"
TRACKER_OPTION = "bt-tracker"


def build_sync_request(
    trackers: Iterable[str],
    secret: str,
    *,
    request_id: str = CORRELATION_ID,
) -> Dict[str, Any]:
    """Build the JSON-RPC envelope that replaces the daemon's ``bt-tracker`` option."""
    return {
        "jsonrpc": "2.0",
        "method": RPC_METHOD,
        "id": request_id,
        "params": [
            f"token:{secret}",
            {TRACKER_OPTION: ",".join(trackers)},
        ],
    }


def encode_request(envelope: Dict[str, Any]) -> str:
    return json.dumps(envelope, separators=(",", ":"))


@dataclass(slots=True)
class SyncResult:
    """Outcome of one correlated JSON-RPC reply."""

    ok: bool
    result: Any = None
    error: Any = None
    transport: Optional[str] = None

    @classmethod
    def from_reply(cls, reply: Dict[str, Any], *, transport: Optional[str] = None) -> "SyncResult":
        if "result" in reply:
            return cls(ok=True, result=reply["result"], transport=transport)
        return cls(ok=False, error=reply.get("error"), transport=transport)

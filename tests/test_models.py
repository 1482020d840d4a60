import json

from trackerlist.models import (
    CORRELATION_ID,
    RPC_METHOD,
    SourceDescriptor,
    SyncResult,
    build_sync_request,
    classify_descriptor,
    encode_request,
    partition_sources,
)


def test_announce_suffix_is_literal() -> None:
    assert classify_descriptor("udp://tracker.example:1337/announce") == "literal"
    assert classify_descriptor("https://list.example/best.txt") == "fetch"
    # suffix match only
    assert classify_descriptor("http://t.example/announce?passkey=1") == "fetch"


def test_partition_keeps_document_order() -> None:
    sources = [
        SourceDescriptor("udp://a/announce"),
        SourceDescriptor("https://list.example/x"),
        SourceDescriptor("udp://b/announce"),
    ]
    literals, urls = partition_sources(sources)
    assert literals == ["udp://a/announce", "udp://b/announce"]
    assert urls == ["https://list.example/x"]


def test_sync_request_envelope() -> None:
    envelope = build_sync_request(["udp://a/announce", "udp://b/announce"], "s3cret")
    assert envelope == {
        "jsonrpc": "2.0",
        "method": RPC_METHOD,
        "id": CORRELATION_ID,
        "params": ["token:s3cret", {"bt-tracker": "udp://a/announce,udp://b/announce"}],
    }
    assert json.loads(encode_request(envelope)) == envelope


def test_sync_result_from_reply() -> None:
    ok = SyncResult.from_reply({"id": "cron", "result": "OK"})
    assert ok.ok and ok.result == "OK"
    err = SyncResult.from_reply({"id": "cron", "error": {"code": 1, "message": "x"}})
    assert not err.ok
    assert err.error == {"code": 1, "message": "x"}

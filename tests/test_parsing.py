from trackerlist.fetchers.parsing import (
    SHAPE_BLANK_LINE,
    SHAPE_COMMA,
    SHAPE_STRUCTURED,
    parse_blank_line_separated,
    parse_structured,
    parse_tracker_payload,
)


def test_structured_json_is_parsed() -> None:
    result = parse_tracker_payload('{"trackers":["udp://b/announce","udp://c/announce"]}')
    assert result.ok
    assert result.shape == SHAPE_STRUCTURED
    assert set(result.trackers) == {"udp://b/announce", "udp://c/announce"}


def test_structured_wins_over_commas_inside_values() -> None:
    payload = '{"trackers": ["udp://a/announce,extra", "udp://b/announce"]}'
    result = parse_tracker_payload(payload)
    assert result.shape == SHAPE_STRUCTURED
    assert "udp://a/announce,extra" in result.trackers


def test_structured_yaml_is_parsed() -> None:
    payload = "trackers:\n  - udp://a/announce\n  - http://b:80/announce\n"
    result = parse_tracker_payload(payload)
    assert result.shape == SHAPE_STRUCTURED
    assert result.trackers == ["udp://a/announce", "http://b:80/announce"]


def test_json_without_trackers_field_falls_through_to_comma() -> None:
    result = parse_tracker_payload('{"urls": ["x", "y"]}')
    assert result.shape == SHAPE_COMMA


def test_comma_text() -> None:
    result = parse_tracker_payload("udp://a/announce,udp://b/announce")
    assert result.shape == SHAPE_COMMA
    assert result.trackers == ["udp://a/announce", "udp://b/announce"]


def test_blank_line_text_strips_and_drops_empty_entries() -> None:
    payload = "udp://a:1337/announce\n\nudp://b:6969/announce\n\n"
    result = parse_tracker_payload(payload)
    assert result.shape == SHAPE_BLANK_LINE
    assert result.trackers == ["udp://a:1337/announce", "udp://b:6969/announce"]


def test_unrecognised_payload_is_rejected() -> None:
    result = parse_tracker_payload("udp://only-one/announce")
    assert not result.ok
    assert result.trackers == []
    assert "unrecognised" in (result.reason or "")


def test_individual_parsers_reject_without_raising() -> None:
    assert not parse_structured("key: [unclosed").ok
    assert not parse_structured("[1, 2, 3]").ok
    assert not parse_blank_line_separated("a\nb").ok


def test_custom_parser_order_is_respected() -> None:
    payload = '{"trackers": ["udp://a/announce", "udp://b/announce"]}'
    result = parse_tracker_payload(payload, parsers=(parse_blank_line_separated, parse_structured))
    assert result.shape == SHAPE_STRUCTURED

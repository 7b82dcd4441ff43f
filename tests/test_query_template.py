import json

import pytest

from checker.errors import TemplateError
from checker.query_template import escape_query, load_template_source, render_query


@pytest.fixture
def template_source():
    return load_template_source()


def test_rendered_query_is_valid_json(template_source):
    rendered = render_query(template_source, "level:ERROR", 1700000000)
    doc = json.loads(rendered)

    must = doc["query"]["bool"]["must"]
    assert must[0]["query_string"]["query"] == "level:ERROR"
    assert must[0]["query_string"]["analyze_wildcard"] is True
    assert doc["query"]["bool"]["must_not"] == []
    assert doc["size"] == 0

    histogram = doc["aggs"]["3"]["date_histogram"]
    assert histogram["interval"] == "1h"
    assert histogram["time_zone"] == "UTC"
    assert histogram["min_doc_count"] == 1


def test_time_from_is_rendered_in_epoch_millis(template_source):
    doc = json.loads(render_query(template_source, "*", 1700000000))
    ts_range = doc["query"]["bool"]["must"][1]["range"]["@timestamp"]
    assert ts_range["gte"] == 1700000000000
    assert ts_range["lte"] == "now"
    assert ts_range["format"] == "epoch_millis"


def test_rendering_is_deterministic(template_source):
    first = render_query(template_source, "host:web-1", 1600000000)
    second = render_query(template_source, "host:web-1", 1600000000)
    assert first == second


def test_only_placeholders_change(template_source):
    a = render_query(template_source, "aaa", 1000)
    b = render_query(template_source, "bbb", 2000)
    assert a.replace("aaa", "X").replace("1000000", "N") == b.replace("bbb", "X").replace("2000000", "N")


def test_escaped_query_survives_json_embedding(template_source):
    raw = 'message:"disk full"'
    doc = json.loads(render_query(template_source, escape_query(raw), 0))
    assert doc["query"]["bool"]["must"][0]["query_string"]["query"] == raw


def test_escape_query_prefixes_each_double_quote():
    assert escape_query('a "b" c') == 'a \\"b\\" c'
    assert escape_query("no quotes") == "no quotes"


def test_dollar_sign_in_query_is_not_reinterpreted(template_source):
    doc = json.loads(render_query(template_source, "price:$time_from", 0))
    assert doc["query"]["bool"]["must"][0]["query_string"]["query"] == "price:$time_from"


def test_missing_placeholder_raises_template_error():
    with pytest.raises(TemplateError):
        render_query('{"query": "$query", "other": $unknown}', "*", 0)


def test_malformed_template_raises_template_error():
    with pytest.raises(TemplateError):
        render_query('{"query": "$query", "gte": $}', "*", 0)


def test_missing_template_file_raises_template_error(tmp_path):
    with pytest.raises(TemplateError):
        load_template_source(tmp_path / "nope.json")

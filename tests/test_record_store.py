import json

import pytest

from invoice_dashboard import record_store
from invoice_dashboard.errors import ParseError, ReadError
from invoice_dashboard.lib import caches
from invoice_dashboard.record_store import RecordStore


def test_load_returns_records_verbatim(tmp_path):
    records = [{"month": "Jan", "revenue": 2000, "extra": [1, 2]}]
    path = tmp_path / "revenue.json"
    path.write_text(json.dumps(records), encoding="utf-8")

    assert record_store.load(path) == records


def test_load_rereads_on_every_call(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text("[1]", encoding="utf-8")
    store = RecordStore()

    assert store.load(path) == [1]
    path.write_text("[1, 2]", encoding="utf-8")
    assert store.load(path) == [1, 2]


def test_missing_document_raises_read_error(tmp_path):
    with pytest.raises(ReadError):
        record_store.load(tmp_path / "missing.json")


def test_malformed_document_raises_parse_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(ParseError):
        record_store.load(path)


def test_non_list_root_raises_parse_error(tmp_path):
    path = tmp_path / "object.json"
    path.write_text('{"month": "Jan"}', encoding="utf-8")

    with pytest.raises(ParseError):
        record_store.load(path)


def test_cached_store_reuses_parsed_document_until_file_changes(tmp_path, monkeypatch):
    path = tmp_path / "doc.json"
    path.write_text("[1, 2]", encoding="utf-8")
    calls = []
    original = record_store._read_records

    def counting_reader(p):
        calls.append(p)
        return original(p)

    monkeypatch.setattr(record_store, "_read_records", counting_reader)
    cache = caches.DiskCache(tmp_path / "cache")
    store = RecordStore(cache)
    try:
        assert store.load(path) == [1, 2]
        assert store.load(path) == [1, 2]
        assert len(calls) == 1

        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert store.load(path) == [1, 2, 3]
        assert len(calls) == 2
    finally:
        cache.close()


def test_cached_store_reports_missing_document(tmp_path):
    cache = caches.DiskCache(tmp_path / "cache")
    try:
        with pytest.raises(ReadError):
            RecordStore(cache).load(tmp_path / "missing.json")
    finally:
        cache.close()


@pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_constants_raise_parse_error(tmp_path, token):
    path = tmp_path / "invoices.json"
    path.write_text(f'[{{"amount": {token}}}]', encoding="utf-8")

    with pytest.raises(ParseError, match=token):
        record_store.load(path)


def test_invalid_utf8_raises_parse_error(tmp_path):
    path = tmp_path / "invoices.json"
    path.write_bytes(b"\xff\xfe[")

    with pytest.raises(ParseError, match="UTF-8"):
        record_store.load(path)

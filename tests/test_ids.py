"""Tests for id, timestamp and URL helpers."""

from datetime import UTC, datetime

from core.ids import (
    absolute_url,
    fingerprint,
    make_job_key,
    path_without_trailing_slash,
    resolve_job_key,
    same_origin,
    utc_timestamp,
)


def test_fingerprint_is_sha1_hex():
    assert fingerprint("abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert fingerprint(b"abc") == fingerprint("abc")


def test_utc_timestamp_millisecond_precision():
    moment = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=UTC)
    assert utc_timestamp(moment) == "2024-05-01T12:00:00.123Z"


def test_utc_timestamp_defaults_to_now():
    stamp = utc_timestamp()
    assert stamp.endswith("Z")
    assert len(stamp) == len("2024-05-01T12:00:00.000Z")


class TestResolveJobKey:
    def test_prefers_job_key(self):
        record = {"job_key": "greenhouse:1", "source_type": "x", "source_job_id": "2"}
        assert resolve_job_key(record) == "greenhouse:1"

    def test_falls_back_to_source_and_id(self):
        record = {"job_key": "", "source_type": "rippling", "source_job_id": "abc"}
        assert resolve_job_key(record) == make_job_key("rippling", "abc") == "rippling:abc"

    def test_falls_back_to_url_digest(self):
        record = {"source_type": "ashby", "job_url": "https://jobs.ashbyhq.com/acme/1"}
        assert resolve_job_key(record) == fingerprint("https://jobs.ashbyhq.com/acme/1")


class TestUrls:
    def test_absolute_url_resolves_relative(self):
        assert absolute_url("https://acme.com/careers", "/jobs/1") == "https://acme.com/jobs/1"

    def test_absolute_url_rejects_non_http(self):
        assert absolute_url("https://acme.com/", "mailto:hr@acme.com") is None
        assert absolute_url("https://acme.com/", "javascript:void(0)") is None

    def test_same_origin(self):
        assert same_origin("https://acme.com/careers", "https://acme.com/jobs/1")
        assert same_origin("https://acme.com/careers", "https://ACME.com:443/jobs/1")
        assert not same_origin("https://acme.com/careers", "http://acme.com/jobs/1")
        assert not same_origin("https://acme.com/careers", "https://jobs.acme.com/1")
        assert not same_origin("https://acme.com/careers", "https://acme.com:8443/1")

    def test_path_without_trailing_slash(self):
        assert path_without_trailing_slash("https://acme.com/careers/") == "/careers"
        assert path_without_trailing_slash("https://acme.com/careers?x=1") == "/careers"

"""Tests for careers URL classification."""

import pytest

from collectors.classifier import classify
from schemas import SourceType


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://boards.greenhouse.io/acme", SourceType.GREENHOUSE),
        ("https://job-boards.greenhouse.io/acme", SourceType.GREENHOUSE),
        ("https://jobs.ashbyhq.com/brightline", SourceType.ASHBY),
        ("https://acme.wd5.myworkdayjobs.com/External", SourceType.WORKDAY),
        ("https://ats.rippling.com/cobalt/jobs", SourceType.RIPPLING),
        ("https://acme.breezy.hr/", SourceType.BREEZY),
        ("https://www.builtinaustin.com/company/acme/jobs", SourceType.BUILT_IN),
        ("https://app.scalis.ai/company/acme", SourceType.SCALIS),
        ("https://acme.com/careers", SourceType.CUSTOM_HTML),
    ],
)
def test_classify(url, expected):
    assert classify(url) == expected


def test_classify_is_case_insensitive():
    assert classify("HTTPS://BOARDS.GREENHOUSE.IO/ACME") == SourceType.GREENHOUSE


def test_classify_never_fails():
    assert classify("") == SourceType.CUSTOM_HTML
    assert classify("not a url") == SourceType.CUSTOM_HTML


def test_first_signature_wins():
    # A Greenhouse board embedded under an Ashby-looking path is still Greenhouse
    assert classify("https://boards.greenhouse.io/ashbyhq.com") == SourceType.GREENHOUSE

import pytest
import requests

from sitemapflat.core import collector as collector_mod
from sitemapflat.core.collector import IndexCollector, collect_pages_from_sitemap_index
from sitemapflat.core.fetcher import SitemapFetcher
from conftest import MockResponse, sitemapindex, urlset


INDEX = "https://example.com/sitemap_index.xml"
S1 = "https://example.com/s1.xml"
S2 = "https://example.com/s2.xml"
S3 = "https://example.com/s3.xml"


def make_collector(session, **kwargs):
	kwargs.setdefault("delay", 0)
	return IndexCollector(fetcher=SitemapFetcher(session=session), **kwargs)


@pytest.fixture
def two_children(mock_session):
	return mock_session({
		INDEX: sitemapindex(S1, S2),
		S1: urlset("/a", "/b"),
		S2: urlset("/b", "/c"),
	})


def test_dedup_across_children(two_children):
	assert make_collector(two_children).collect(INDEX) == ["/a", "/b", "/c"]


def test_cap_stops_before_next_child(two_children):
	assert make_collector(two_children).collect(INDEX, max_pages=2) == ["/a", "/b"]
	assert S2 not in two_children.calls


def test_cap_inside_child(two_children):
	assert make_collector(two_children).collect(INDEX, max_pages=3) == ["/a", "/b", "/c"]
	assert make_collector(two_children).collect(INDEX, max_pages=1) == ["/a"]


def test_zero_cap(two_children):
	assert make_collector(two_children).collect(INDEX, max_pages=0) == []
	assert two_children.calls == [INDEX]


def test_single_child_index(mock_session):
	s = mock_session({INDEX: sitemapindex(S1), S1: urlset("/only")})
	assert make_collector(s).collect(INDEX) == ["/only"]


def test_index_404_returns_empty(mock_session):
	s = mock_session({})
	assert make_collector(s).collect(INDEX) == []


def test_index_connection_error_returns_empty(mock_session):
	s = mock_session({INDEX: requests.Timeout("timed out")})
	assert make_collector(s).collect(INDEX) == []


def test_index_malformed_returns_empty(mock_session):
	s = mock_session({INDEX: "<sitemapindex><sitemap>"})
	assert make_collector(s).collect(INDEX) == []


def test_failing_child_is_skipped(mock_session):
	s = mock_session({
		INDEX: sitemapindex(S1, S2, S3),
		S1: urlset("/a"),
		S2: MockResponse("", status_code=500, reason="Internal Server Error"),
		S3: urlset("/c", "/a"),
	})
	assert make_collector(s).collect(INDEX) == ["/a", "/c"]
	assert s.calls == [INDEX, S1, S2, S3]


def test_malformed_child_is_skipped(mock_session):
	s = mock_session({
		INDEX: sitemapindex(S1, S2),
		S1: "<urlset><url>",
		S2: urlset("/b"),
	})
	assert make_collector(s).collect(INDEX) == ["/b"]


def test_plain_sitemap_fallback(mock_session):
	s = mock_session({INDEX: urlset("/x", "/y", "/z")})
	assert make_collector(s).collect(INDEX) == ["/x", "/y", "/z"]
	assert make_collector(s).collect(INDEX, max_pages=2) == ["/x", "/y"]
	assert s.calls == [INDEX, INDEX]


def test_unrecognized_document_is_empty(mock_session):
	s = mock_session({INDEX: "<html><body>not a sitemap</body></html>"})
	assert make_collector(s).collect(INDEX) == []


def test_idempotent(two_children):
	c = make_collector(two_children)
	assert c.collect(INDEX) == c.collect(INDEX)


def test_concurrent_matches_sequential(mock_session):
	mapping = {
		INDEX: sitemapindex(S1, S2, S3),
		S1: urlset("/a", "/b"),
		S2: urlset("/b", "/c", "/d"),
		S3: urlset("/d", "/e"),
	}
	sequential = make_collector(mock_session(mapping)).collect(INDEX)
	for workers in (2, 3, 8):
		assert make_collector(mock_session(mapping), max_workers=workers).collect(INDEX) == sequential
	assert make_collector(mock_session(mapping), max_workers=2).collect(INDEX, max_pages=3) == ["/a", "/b", "/c"]


def test_pause_between_children_only(monkeypatch, mock_session):
	pauses = []

	def fake_pause(delay, stop_flag=None):
		pauses.append(delay)
		return True

	monkeypatch.setattr(collector_mod, "polite_pause", fake_pause)
	mapping = {
		INDEX: sitemapindex(S1, S2, S3),
		S1: urlset("/a"),
		S2: MockResponse("", status_code=503, reason="Service Unavailable"),
		S3: urlset("/c"),
	}
	make_collector(mock_session(mapping), delay=0.25).collect(INDEX)
	assert pauses == [0.25, 0.25]

	pauses.clear()
	make_collector(mock_session(mapping), delay=0.25).collect(INDEX, max_pages=1)
	assert pauses == []


def test_stop_flag_returns_partial(mock_session):
	s = mock_session({
		INDEX: sitemapindex(S1, S2),
		S1: urlset("/a"),
		S2: urlset("/b"),
	})
	c = make_collector(s, stop_flag=lambda: S1 in s.calls)
	assert c.collect(INDEX) == ["/a"]
	assert S2 not in s.calls


def test_module_helper(two_children):
	urls = collect_pages_from_sitemap_index(INDEX, max_pages=2, fetcher=SitemapFetcher(session=two_children), delay=0)
	assert urls == ["/a", "/b"]


def test_concurrent_cap_stops_before_next_child(two_children):
	c = make_collector(two_children, delay=0.05, max_workers=2)
	assert c.collect(INDEX, max_pages=2) == ["/a", "/b"]
	assert S2 not in two_children.calls


def test_concurrent_requests_are_spaced(mock_session):
	s = mock_session({
		INDEX: sitemapindex(S1, S2, S3),
		S1: urlset("/a", "/b"),
		S2: urlset("/b", "/c"),
		S3: urlset("/d"),
	})
	assert make_collector(s, delay=0.1, max_workers=2).collect(INDEX) == ["/a", "/b", "/c", "/d"]
	assert s.started[S2] - s.started[S1] >= 0.08
	assert s.started[S3] - s.started[S2] >= 0.08


def test_concurrent_stop_flag_returns_partial(mock_session):
	s = mock_session({
		INDEX: sitemapindex(S1, S2, S3),
		S1: urlset("/a"),
		S2: urlset("/b"),
		S3: urlset("/c"),
	})
	c = make_collector(s, delay=0.05, max_workers=2, stop_flag=lambda: S1 in s.calls)
	assert c.collect(INDEX) == ["/a"]
	assert s.calls == [INDEX, S1]

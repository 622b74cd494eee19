import time

import pytest


NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def urlset(*locs):
	entries = "".join(f"<url><loc>{u}</loc></url>" for u in locs)
	return f'<?xml version="1.0" encoding="UTF-8"?><urlset xmlns="{NS}">{entries}</urlset>'


def sitemapindex(*locs):
	entries = "".join(f"<sitemap><loc>{u}</loc></sitemap>" for u in locs)
	return f'<?xml version="1.0" encoding="UTF-8"?><sitemapindex xmlns="{NS}">{entries}</sitemapindex>'


class MockResponse:
	def __init__(self, text="", status_code=200, reason="OK"):
		self.text = text
		self.status_code = status_code
		self.reason = reason


class MockSession:
	"""Maps URL -> body text, MockResponse, or an exception to raise."""

	def __init__(self, mapping):
		self.mapping = mapping
		self.calls = []
		self.started = {}

	def get(self, url, timeout=12):
		self.calls.append(url)
		self.started[url] = time.monotonic()
		value = self.mapping.get(url)
		if value is None:
			return MockResponse("", status_code=404, reason="Not Found")
		if isinstance(value, Exception):
			raise value
		if isinstance(value, MockResponse):
			return value
		return MockResponse(value)


@pytest.fixture
def mock_session():
	return MockSession

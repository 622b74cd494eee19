# SitemapFlat — Networking utilities (requests session with retries)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


RETRY_STATUSES = (429, 500, 502, 503, 504)


def build_session(user_agent: str, retries: int = 3, backoff: float = 0.5) -> requests.Session:
	"""Build a requests Session for sitemap retrieval.

	Transient statuses are retried by urllib3; once retries are exhausted the
	final response is returned as-is so callers can report its status.
	"""
	s = requests.Session()
	s.headers.update(
		{
			"User-Agent": user_agent,
			"Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
		}
	)
	retry = Retry(
		total=max(0, int(retries)),
		backoff_factor=backoff,
		status_forcelist=RETRY_STATUSES,
		allowed_methods=frozenset({"GET", "HEAD"}),
		raise_on_status=False,
	)
	adapter = HTTPAdapter(max_retries=retry)
	s.mount("http://", adapter)
	s.mount("https://", adapter)
	return s

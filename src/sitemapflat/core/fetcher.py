# SitemapFlat — Sitemap fetching
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from typing import Optional
import xml.etree.ElementTree as ET

import requests

from .document import SitemapDocument, parse_document
from .errors import FetchError, ParseError
from .session import make_session
from ..config import DEFAULT_USER_AGENT


logger = logging.getLogger(__name__)


class SitemapFetcher:
	"""Fetches one sitemap URL and returns its parsed document.

	Holds no state between calls besides the pooled HTTP session.
	"""

	def __init__(
		self,
		session: Optional[requests.Session] = None,
		timeout: float = 12.0,
		user_agent: str = DEFAULT_USER_AGENT,
		retries: int = 3,
		backoff: float = 0.5,
	) -> None:
		if timeout <= 0:
			raise ValueError(f"timeout must be positive, got {timeout}")
		self.session = session or make_session(user_agent=user_agent, retries=retries, backoff=backoff)
		self.timeout = timeout

	def fetch(self, url: str) -> SitemapDocument:
		logger.debug("Fetching sitemap: %s", url)
		try:
			r = self.session.get(url, timeout=self.timeout)
		except requests.RequestException as e:
			raise FetchError(url, None, str(e)) from e
		if not 200 <= r.status_code < 300:
			raise FetchError(url, r.status_code, r.reason or "")
		try:
			return parse_document(r.text)
		except ET.ParseError as e:
			raise ParseError(url, str(e)) from e

# SitemapFlat — Fetch and parse errors
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from typing import Optional


class SitemapError(Exception):
	"""Base class for failures while retrieving a single sitemap document."""

	def __init__(self, url: str, message: str) -> None:
		super().__init__(message)
		self.url = url


class FetchError(SitemapError):
	"""Non-success HTTP status or transport failure (status_code is None)."""

	def __init__(self, url: str, status_code: Optional[int], reason: str) -> None:
		if status_code is None:
			message = f"Failed to fetch sitemap: {reason}"
		else:
			message = f"Failed to fetch sitemap: {status_code} {reason}".rstrip()
		super().__init__(url, message)
		self.status_code = status_code
		self.reason = reason


class ParseError(SitemapError):
	def __init__(self, url: str, message: str) -> None:
		super().__init__(url, f"Failed to parse sitemap: {message}")
		self.message = message

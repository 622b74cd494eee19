# SitemapFlat — Sitemap index traversal and page URL collection
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import logging
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Deque, Iterable, List, Optional, Sequence, Set

from .document import extract_child_sitemaps, extract_page_urls
from .errors import SitemapError
from .fetcher import SitemapFetcher
from .session import RequestPacer, StopFlag, polite_pause


logger = logging.getLogger(__name__)


class _Accumulator:
	"""First-seen ordered, duplicate-free URL list with an optional cap."""

	def __init__(self, max_pages: Optional[int]) -> None:
		self.max_pages = None if max_pages is None else max(0, int(max_pages))
		self.urls: List[str] = []
		self._seen: Set[str] = set()

	@property
	def full(self) -> bool:
		return self.max_pages is not None and len(self.urls) >= self.max_pages

	def extend(self, urls: Iterable[str]) -> None:
		for u in urls:
			if self.full:
				break
			if u in self._seen:
				continue
			self._seen.add(u)
			self.urls.append(u)


class IndexCollector:
	"""Flattens a sitemap index into a deduplicated list of page URLs.

	Failures are soft: an unreachable index yields an empty list and a
	failing child sitemap is skipped. With max_workers > 1 up to that many
	children are in flight at once; request starts are still spaced by delay,
	the cap is checked before each new request, and results are merged in
	discovery order so the output matches the sequential walk.
	"""

	def __init__(
		self,
		fetcher: Optional[SitemapFetcher] = None,
		delay: float = 0.5,
		max_workers: int = 1,
		stop_flag: Optional[StopFlag] = None,
	) -> None:
		self.fetcher = fetcher or SitemapFetcher()
		self.delay = max(0.0, float(delay))
		self.max_workers = max(1, int(max_workers))
		self.stop_flag = stop_flag

	def _stopped(self) -> bool:
		return bool(self.stop_flag and self.stop_flag())

	def _fetch_pages(self, sitemap_url: str) -> Optional[List[str]]:
		try:
			doc = self.fetcher.fetch(sitemap_url)
		except SitemapError as e:
			logger.error("Error processing sitemap %s: %s", sitemap_url, e)
			return None
		urls = extract_page_urls(doc)
		logger.info("Found %d URLs in sitemap %s", len(urls), sitemap_url)
		return urls

	def collect(self, index_url: str, max_pages: Optional[int] = None) -> List[str]:
		acc = _Accumulator(max_pages)
		try:
			index_doc = self.fetcher.fetch(index_url)
		except SitemapError as e:
			logger.error("Failed to collect pages from sitemap index %s: %s", index_url, e)
			return []

		sitemap_urls = extract_child_sitemaps(index_doc)
		if not sitemap_urls:
			# the "index" may itself be a plain urlset
			logger.warning("No sitemaps found in the sitemap index %s", index_url)
			acc.extend(extract_page_urls(index_doc))
			return acc.urls

		logger.info("Found %d sitemaps in the index", len(sitemap_urls))
		if self.max_workers > 1:
			self._walk_concurrent(sitemap_urls, acc)
		else:
			self._walk(sitemap_urls, acc)
		logger.info("Collected a total of %d unique URLs", len(acc.urls))
		return acc.urls

	def _walk(self, sitemap_urls: Sequence[str], acc: _Accumulator) -> None:
		for i, sm in enumerate(sitemap_urls):
			if acc.full or self._stopped():
				break
			urls = self._fetch_pages(sm)
			if urls:
				acc.extend(urls)
			if acc.full or i == len(sitemap_urls) - 1:
				break
			if not polite_pause(self.delay, self.stop_flag):
				logger.info("Collection stopped by caller")
				break

	def _walk_concurrent(self, sitemap_urls: Sequence[str], acc: _Accumulator) -> None:
		pacer = RequestPacer(self.delay)
		pending: Deque[Future] = deque()
		with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
			for sm in sitemap_urls:
				_merge_done(pending, acc)
				if len(pending) >= self.max_workers:
					# oldest fetch must finish before another starts
					_merge_next(pending, acc)
				if acc.full or self._stopped():
					break
				if not pacer.wait(self.stop_flag):
					logger.info("Collection stopped by caller")
					break
				# fetches that finished during the pause may have filled the cap
				_merge_done(pending, acc)
				if acc.full:
					break
				pending.append(pool.submit(self._fetch_pages, sm))
			while pending:
				_merge_next(pending, acc)


def _merge_next(pending: Deque[Future], acc: _Accumulator) -> None:
	urls = pending.popleft().result()
	if urls:
		acc.extend(urls)


def _merge_done(pending: Deque[Future], acc: _Accumulator) -> None:
	# only leading futures, so merge order stays discovery order
	while pending and pending[0].done():
		_merge_next(pending, acc)


def collect_pages_from_sitemap_index(
	index_url: str,
	max_pages: Optional[int] = None,
	fetcher: Optional[SitemapFetcher] = None,
	delay: float = 0.5,
	max_workers: int = 1,
	stop_flag: Optional[StopFlag] = None,
) -> List[str]:
	collector = IndexCollector(fetcher=fetcher, delay=delay, max_workers=max_workers, stop_flag=stop_flag)
	return collector.collect(index_url, max_pages=max_pages)

# SitemapFlat — HTTP session and politeness helpers
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import threading
import time
from typing import Callable, Optional
import requests
from ..utils.net import build_session


StopFlag = Callable[[], bool]


def polite_pause(delay: float, stop_flag: Optional[StopFlag] = None) -> bool:
	"""Sleep for delay seconds between requests.

	Returns False if stop_flag fired before the pause finished.
	"""
	if stop_flag and stop_flag():
		return False
	if delay <= 0:
		return True
	end = time.monotonic() + delay
	while True:
		remaining = end - time.monotonic()
		if remaining <= 0:
			return True
		# small sleep loop to remain interruptible by caller
		time.sleep(min(0.05, remaining))
		if stop_flag and stop_flag():
			return False


class RequestPacer:
	"""Keeps request starts at least min_delay apart using monotonic timestamps.

	Thread-safe; call before each request.
	"""

	def __init__(self, min_delay: float) -> None:
		self.min_delay = max(0.0, float(min_delay))
		self._lock = threading.Lock()
		self._last: Optional[float] = None

	def wait(self, stop_flag: Optional[StopFlag] = None) -> bool:
		with self._lock:
			remaining = 0.0
			if self._last is not None:
				remaining = self.min_delay - (time.monotonic() - self._last)
			if not polite_pause(remaining, stop_flag):
				return False
			self._last = time.monotonic()
			return True


def make_session(user_agent: str, retries: int, backoff: float) -> requests.Session:
	return build_session(user_agent=user_agent, retries=retries, backoff=backoff)

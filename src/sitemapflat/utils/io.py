# SitemapFlat — IO helpers (directories, URL list writing)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import json
import os
from typing import Iterable


OUTPUT_FORMATS = ("txt", "jsonl")


def ensure_dirs(*paths: str) -> None:
	for p in paths:
		if p:
			os.makedirs(p, exist_ok=True)


def write_urls(path: str, urls: Iterable[str], fmt: str = "txt") -> int:
	"""Write URLs one per line (txt) or as {"url": ...} objects (jsonl).

	Returns the number of URLs written.
	"""
	if fmt not in OUTPUT_FORMATS:
		raise ValueError(f"unsupported output format: {fmt}")
	ensure_dirs(os.path.dirname(path))
	count = 0
	with open(path, "w", encoding="utf-8") as f:
		for u in urls:
			if fmt == "jsonl":
				f.write(json.dumps({"url": u}, ensure_ascii=False) + "\n")
			else:
				f.write(u + "\n")
			count += 1
	return count

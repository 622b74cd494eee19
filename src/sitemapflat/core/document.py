# SitemapFlat — Sitemap document model and extraction
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

from enum import Enum
from typing import List, NamedTuple, Optional, Tuple
import xml.etree.ElementTree as ET


class DocumentKind(Enum):
	INDEX = "sitemapindex"
	URLSET = "urlset"
	UNRECOGNIZED = "unrecognized"


class SitemapDocument(NamedTuple):
	"""A parsed sitemap, classified once by its root element.

	locs holds child sitemap URLs for an index, page URLs for a urlset,
	and is empty for anything else.
	"""

	kind: DocumentKind
	locs: Tuple[str, ...] = ()


_ENTRY_TAGS = {
	DocumentKind.INDEX: "sitemap",
	DocumentKind.URLSET: "url",
}


def _local_name(tag: str) -> str:
	# "{http://www.sitemaps.org/schemas/sitemap/0.9}urlset" -> "urlset"
	return tag.rsplit("}", 1)[-1].lower()


def _classify(root: ET.Element) -> DocumentKind:
	name = _local_name(root.tag)
	if name == DocumentKind.INDEX.value:
		return DocumentKind.INDEX
	if name == DocumentKind.URLSET.value:
		return DocumentKind.URLSET
	return DocumentKind.UNRECOGNIZED


def parse_document(text: str) -> SitemapDocument:
	"""Parse sitemap XML into a SitemapDocument.

	Entries are always collected into a sequence, whether the document holds
	one or many of them. Entries without a non-blank <loc> are skipped.
	Raises xml.etree.ElementTree.ParseError on malformed input.
	"""
	root = ET.fromstring(text)
	kind = _classify(root)
	entry_tag = _ENTRY_TAGS.get(kind)
	if entry_tag is None:
		return SitemapDocument(kind)
	locs: List[str] = []
	for entry in root:
		if not isinstance(entry.tag, str) or _local_name(entry.tag) != entry_tag:
			continue
		for child in entry:
			if isinstance(child.tag, str) and _local_name(child.tag) == "loc":
				loc = (child.text or "").strip()
				if loc:
					locs.append(loc)
				break
	return SitemapDocument(kind, tuple(locs))


def extract_child_sitemaps(doc: Optional[SitemapDocument]) -> List[str]:
	"""Child sitemap URLs of an index; empty when doc is not an index."""
	if doc is None or doc.kind is not DocumentKind.INDEX:
		return []
	return list(doc.locs)


def extract_page_urls(doc: Optional[SitemapDocument]) -> List[str]:
	"""Page URLs of a urlset; empty when doc is not a urlset."""
	if doc is None or doc.kind is not DocumentKind.URLSET:
		return []
	return list(doc.locs)

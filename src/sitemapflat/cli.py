# SitemapFlat — CLI (Typer)
# Author: Sachin Chhetri
# Year: 2025
# License: MIT

import json
import click
import typer
from typing import Optional
from rich import print

from .config import Settings
from .core.collector import IndexCollector
from .core.fetcher import SitemapFetcher
from .logging_config import configure_logging
from .utils.io import OUTPUT_FORMATS, write_urls

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def collect(
	index_url: str = typer.Argument(..., help="Sitemap index (or plain sitemap) URL"),
	max_pages: Optional[int] = typer.Option(None, "--max-pages", "-n", min=0, help="Maximum number of page URLs"),
	delay: Optional[float] = typer.Option(None, min=0.0, help="Pause between child sitemap requests (seconds)"),
	workers: Optional[int] = typer.Option(None, min=1, help="Child sitemaps fetched concurrently"),
	timeout: Optional[float] = typer.Option(None, click_type=click.FloatRange(min=0.0, min_open=True), help="HTTP timeout (seconds)"),
	user_agent: Optional[str] = typer.Option(None, help="Override User-Agent"),
	retries: Optional[int] = typer.Option(None, min=0, help="HTTP retry attempts"),
	backoff: Optional[float] = typer.Option(None, min=0.0, help="Retry backoff factor"),
	output: Optional[str] = typer.Option(None, "--output", "-o", help="Write URLs to this file instead of stdout"),
	fmt: str = typer.Option("txt", "--format", help="Output format: txt or jsonl"),
	log_level: Optional[str] = typer.Option(None, help="Log level"),
	log_dir: Optional[str] = typer.Option(None, help="Directory for the rotating log file"),
):
	"""Collect deduplicated page URLs from a sitemap index."""
	if fmt not in OUTPUT_FORMATS:
		raise typer.BadParameter(f"must be one of {', '.join(OUTPUT_FORMATS)}", param_hint="--format")
	cfg = Settings()
	configure_logging(level=log_level or cfg.log_level, log_dir=log_dir if log_dir is not None else cfg.log_dir)
	fetcher = SitemapFetcher(
		timeout=timeout if timeout is not None else cfg.timeout,
		user_agent=user_agent or cfg.user_agent,
		retries=retries if retries is not None else cfg.retries,
		backoff=backoff if backoff is not None else cfg.backoff,
	)
	collector = IndexCollector(
		fetcher=fetcher,
		delay=delay if delay is not None else cfg.delay,
		max_workers=workers or cfg.max_workers,
	)
	limit = max_pages if max_pages is not None else cfg.max_pages
	urls = collector.collect(index_url, max_pages=limit)
	if output:
		written = write_urls(output, urls, fmt)
		print({"index": index_url, "urls": written, "output": output})
	else:
		for u in urls:
			typer.echo(json.dumps({"url": u}, ensure_ascii=False) if fmt == "jsonl" else u)
	# an empty result only counts as failure when pages were asked for
	if not urls and limit != 0:
		raise typer.Exit(code=1)


@app.command("print-config")
def print_config():
	"""Print effective configuration from environment."""
	cfg = Settings()
	print(cfg.model_dump())


def main():
	app()


if __name__ == "__main__":
	main()

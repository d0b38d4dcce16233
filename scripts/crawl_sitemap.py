#!/usr/bin/env python3
# ==============================================================================
# crawl_sitemap.py — Sitemap Crawl Script
# ==============================================================================
# Purpose: Crawl a sitemap tree from the command line and print the result
# ==============================================================================

"""
Sitemap Crawl Script

Crawls a sitemap URL (or a source from config/sitemaps.yaml) and prints the
files, sites and errors as JSON.

Usage:
    python scripts/crawl_sitemap.py <url>                          # Crawl a sitemap URL
    python scripts/crawl_sitemap.py <url> --retries 2 --concurrency 4
    python scripts/crawl_sitemap.py --source <source_id> --write   # Crawl a configured source and save output
    python scripts/crawl_sitemap.py --help                         # Show help
"""

import argparse
import asyncio
import sys

from sitemap_tree.services.config_service import config_service
from sitemap_tree.services.sitemap_service import SitemapService
from sitemap_tree.utils.json_writer import JsonWriter
from sitemap_tree.utils.log_config import configure_logging

# ==============================================================================
# Main
# ==============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Sitemap Crawl Script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/crawl_sitemap.py https://www.example.com/sitemap.xml
  python scripts/crawl_sitemap.py https://www.example.com/sitemap.xml --lastmod 1735689600000
  python scripts/crawl_sitemap.py --source example_blog --write
        """
    )
    parser.add_argument("url", nargs="?", help="Root sitemap URL")
    parser.add_argument("--source", type=str, help="Source ID from sitemaps.yaml")
    parser.add_argument("--timeout", type=int, help="Request timeout in milliseconds")
    parser.add_argument("--lastmod", type=int, help="Minimum lastmod as epoch milliseconds")
    parser.add_argument("--concurrency", type=int, help="Maximum sitemap fetches in flight")
    parser.add_argument("--retries", type=int, help="Retry attempts per failed sitemap")
    parser.add_argument("--insecure", action="store_true", help="Skip TLS certificate verification")
    parser.add_argument("--debug", action="store_true", help="Enable crawl diagnostics")
    parser.add_argument("--write", action="store_true", help="Write results under output/")
    return parser


async def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if not args.url and not args.source:
        print("Either a sitemap URL or --source is required", file=sys.stderr)
        return 2

    configure_logging("DEBUG" if args.debug else config_service.log_level)

    service = SitemapService(json_writer=JsonWriter() if args.write else None)

    if args.source:
        if not config_service.source(args.source):
            print(f"Source {args.source} not found in configuration", file=sys.stderr)
            return 2
        response = await service.crawl_source(args.source)
    else:
        response = await service.crawl_url(
            args.url,
            timeout=args.timeout,
            lastmod=args.lastmod,
            concurrency=args.concurrency,
            retries=args.retries,
            reject_unauthorized=False if args.insecure else None,
            debug=True if args.debug else None
        )

    print(response.model_dump_json(indent=2))
    return 1 if response.errors else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

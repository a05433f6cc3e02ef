"""Example usage of the page analyzer - single page and competitor comparison."""

import asyncio

from seolens import Config, PageAnalyzer, PageNotAnalyzableError
from seolens.logging_config import setup_logging
from seolens.presentation import render_text


def main():
    """Run example analyses."""
    config = Config.from_env()
    setup_logging(level=config.log_level)

    analyzer = PageAnalyzer(config=config)

    # Analyze a single URL
    url = "example.com"
    print(f"Analyzing {url}...")

    try:
        report = analyzer.analyze(url)
    except PageNotAnalyzableError as e:
        print(f"Failed: {e}")
        return

    print(f"Title: {report.identity.title}")
    print(f"Words: {report.content.word_count}")
    print(f"Links: {report.links.internal_links_count} internal, "
          f"{report.links.external_links_count} external")

    # Compare with a competitor, fetching both pages concurrently
    result = asyncio.run(analyzer.compare_async(url, "example.org"))
    print(render_text(result))


if __name__ == "__main__":
    main()

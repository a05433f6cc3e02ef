"""Command-line interface for the page analyzer."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from seolens.analyzer import PageAnalyzer
from seolens.config import Config
from seolens.exceptions import PageNotAnalyzableError, ValidationError
from seolens.logging_config import get_logger, setup_logging
from seolens.presentation import render_html, render_json, render_text

logger = get_logger(__name__)

RENDERERS = {
    "text": render_text,
    "json": render_json,
    "html": render_html,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seolens",
        description="Extract on-page SEO signals from a web page, optionally "
                    "side by side with a competitor's page.",
    )
    parser.add_argument("url", help="URL to analyze (https:// is assumed if omitted)")
    parser.add_argument(
        "--competitor",
        "-c",
        help="Competitor URL to analyze for comparison",
    )
    parser.add_argument(
        "--output",
        "-o",
        choices=sorted(RENDERERS),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file instead of stdout",
    )
    parser.add_argument(
        "--relay",
        action="store_true",
        help="Fetch through the cross-origin relay instead of directly",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        help="Request timeout in seconds (default: TIMEOUT env or 30)",
    )
    parser.add_argument(
        "--user-agent",
        help="User-Agent header to send",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: LOG_LEVEL env or INFO)",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    """Overlay command-line flags on the environment configuration."""
    config = Config.from_env()
    if args.relay:
        config.fetch_strategy = "relay"
    if args.timeout is not None:
        config.timeout = args.timeout
    if args.user_agent:
        config.user_agent = args.user_agent
    if args.log_level:
        config.log_level = args.log_level
    return config


def main(argv: Optional[list[str]] = None) -> int:
    """Run the analyzer.

    Returns:
        Exit code: 0 on success (even if only the competitor failed),
        1 if the primary page could not be analyzed, 2 on invalid input
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(args)

    setup_logging(level=config.log_level, log_file=args.log_file)
    logger.debug(f"Effective configuration: {config.to_dict()}")

    analyzer = PageAnalyzer(config=config)
    try:
        result = analyzer.compare(args.url, args.competitor)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except PageNotAnalyzableError as e:
        print(f"Error analyzing the website: {e}", file=sys.stderr)
        return 1
    finally:
        analyzer.close()

    output = RENDERERS[args.output](result)

    if args.output_file:
        output_path = Path(args.output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output, encoding="utf-8")
        logger.info(f"Results written to {output_path}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())

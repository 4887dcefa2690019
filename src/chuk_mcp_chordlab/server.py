#!/usr/bin/env python3
"""
Entry point for the CHUK Chord Lab MCP Server.

Serves the chord-learning tools over stdio or HTTP:
- chord_parse, chord_analyze, chord_voice_leading
- key_scale_notes, key_diatonic_chords, key_resolve_numerals
- progression_analyze, progression_suggest_next,
  progression_list_examples, progression_describe_example

Example progressions are read from the bundled library and from a
`progressions/` directory in the working directory.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Chord Lab MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to avoid issues
    from chuk_mcp_chordlab.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Chord Lab MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Chord Lab MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()

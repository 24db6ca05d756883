#!/usr/bin/env python3
"""
Main entry point for the verified source merger.

This script orchestrates the workflow:
1. Parse command-line arguments
2. Initialize the extractor
3. Fetch, and optionally merge, the verified source
4. Write the result
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from sourcemerge import EtherscanSourceExtractor, SourceCodeError

# Load environment variables
load_dotenv(override=True)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Fetch verified Solidity source from an Etherscan like explorer and merge it into one file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  ETHERSCAN_API_KEY     Etherscan API key
  EXPLORER_NETWORK      Network name or chain id (default: ethereum)
  EXPLORER_URL          Explorer API url, overrides the network
  EXPLORER_TIMEOUT      Seconds to wait for the explorer (default: 30)

Priority: Command-line arguments > Environment variables > Defaults
        """
    )
    parser.add_argument(
        'address',
        help='Contract address with a 0x prefix'
    )
    parser.add_argument(
        '--filename',
        default=None,
        help='Case-sensitive name of one source file without the .sol extension'
    )
    parser.add_argument(
        '--network',
        default=os.getenv('EXPLORER_NETWORK') or 'ethereum',
        help='Network name or chain id (env: EXPLORER_NETWORK, default: ethereum)'
    )
    parser.add_argument(
        '--api-key',
        default=os.getenv('ETHERSCAN_API_KEY'),
        help='Etherscan API key (env: ETHERSCAN_API_KEY)'
    )
    parser.add_argument(
        '--url',
        default=os.getenv('EXPLORER_URL'),
        help='Explorer API url (env: EXPLORER_URL)'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=float(os.getenv('EXPLORER_TIMEOUT') or '30'),
        help='Seconds to wait for the explorer (env: EXPLORER_TIMEOUT, default: 30)'
    )
    parser.add_argument(
        '--list-files',
        action='store_true',
        default=False,
        help='List the verified source files instead of merging them'
    )
    parser.add_argument(
        '--output',
        type=Path,
        default=None,
        help='File to write the merged code to (default: stdout)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Enable debug mode to log to file (default: False)'
    )
    return parser


def configure_logging(debug: bool) -> None:
    if debug:
        output_dir = Path("output")
        output_dir.mkdir(exist_ok=True)

        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(output_dir / 'merge_source.log')
            ]
        )
    else:
        logging.basicConfig(
            level=logging.CRITICAL,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.NullHandler()
            ]
        )


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.debug)

    if not args.api_key and not args.url:
        parser.error("--api-key is required (or set ETHERSCAN_API_KEY environment variable)")

    try:
        extractor = EtherscanSourceExtractor(
            etherscan_api_key=args.api_key,
            network=args.network,
            url=args.url,
            timeout=args.timeout,
        )

        if args.list_files:
            fetched = extractor.get_source_code(args.address, args.filename)
            print(f"Contract: {fetched.contract_name}")
            print(f"Compiler: {fetched.compiler_version}")
            for filename in fetched.filenames:
                print(filename)
            return 0

        merged = extractor.get_solidity_code(args.address, args.filename)
    except SourceCodeError as e:
        logger.error(f"❌ {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(merged.solidity_code, encoding='utf-8')
        logger.info(f"✓ Wrote merged code for {merged.contract_name} to {args.output}")
    else:
        sys.stdout.write(merged.solidity_code)
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
Deployment CLI
Parses options, configures logging and reports the deployed address
"""

import argparse
import sys
from typing import List, Optional
from loguru import logger

from .network_config import get_network, list_networks
from .runner import (
    DEFAULT_CONFIRMATION_TIMEOUT,
    DEFAULT_CONTRACT,
    DeploymentRequest,
    DeploymentRunner
)


DEFAULT_NETWORK = 'curtis'


def configure_logging(level: str = 'INFO', log_file: Optional[str] = None):
    """
    Configure loguru sinks

    Args:
        level: Minimum level for the stderr sink
        log_file: Optional path for a rotating DEBUG log
    """
    logger.remove()
    # diagnose=False keeps local variables (private keys) out of tracebacks
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level,
        diagnose=False
    )

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG",
            diagnose=False
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='landform-deploy',
        description="Deploy a compiled contract to an ApeChain network"
    )
    parser.add_argument(
        "--network",
        choices=list_networks(),
        default=DEFAULT_NETWORK,
        help=f"Target network (default: {DEFAULT_NETWORK})"
    )
    parser.add_argument(
        "--contract",
        default=DEFAULT_CONTRACT,
        help=f"Contract name or fully qualified name (default: {DEFAULT_CONTRACT})"
    )
    parser.add_argument(
        "--artifacts",
        default="artifacts",
        help="Hardhat artifacts directory (default: artifacts)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_CONFIRMATION_TIMEOUT,
        help=f"Seconds to wait for confirmation (default: {DEFAULT_CONFIRMATION_TIMEOUT})"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for stderr (default: INFO)"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write DEBUG logs to this file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one deployment

    Returns:
        Process exit code (0 on success, 1 on any failure)
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    logger.info("=" * 70)
    logger.info(f"🚀 Deploying {args.contract} to {args.network}")
    logger.info("=" * 70)

    try:
        network = get_network(args.network)
        runner = DeploymentRunner(
            network,
            artifacts_dir=args.artifacts,
            confirmation_timeout=args.timeout
        )
        result = runner.run(DeploymentRequest(contract_name=args.contract))

    except Exception as e:
        logger.exception(f"❌ Deployment failed: {e}")
        return 1

    print(f"✅ {result.contract_name} deployed to: {result.address}")
    return 0

#!/usr/bin/env python3
"""
Password Generator - Main Entry Point

Usage:
    python main.py

    # With a config file
    CONFIG_PATH=config/default.yaml python main.py

    # Parallel hashing and persistence
    MAX_WORKERS=4 PERSIST_PASSWORDS=true python main.py
"""

import os
import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import uvicorn
from dotenv import load_dotenv

from core.config import init_settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Reduce noise from libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main():
    """Main entry point"""
    # Load environment variables
    load_dotenv()

    settings = init_settings(os.getenv("CONFIG_PATH"))

    # Setup logging
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info("Password Generator")
    logger.info(
        f"Limits: count {settings.limits.min_count}-{settings.limits.max_count}, "
        f"length {settings.limits.min_length}-{settings.limits.max_length}, "
        f"cost {settings.limits.min_cost_factor}-{settings.limits.max_cost_factor}"
    )
    logger.info(f"Workers: {settings.concurrency.max_workers}")
    logger.info("=" * 60)

    # Run server
    uvicorn.run(
        "api.app:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.debug
    )


if __name__ == "__main__":
    main()

"""
Main entry point for the lecture simulator.
"""

import logging
import sys
from typing import List, Optional

from .config import SimulationConfig, load_config
from .core.catalog import LectureCatalog
from .core.exceptions import ConfigurationError
from .services import SimulationService

logger = logging.getLogger(__name__)


def start_rest_server(config: SimulationConfig, host: str = "127.0.0.1", port: int = 8000):
    """Serve the REST API until interrupted."""
    import uvicorn

    from .api.rest_api import LectureSimRestAPI

    api = LectureSimRestAPI(config=config, catalog=LectureCatalog())
    print(f"✓ REST server starting on http://{host}:{port}")
    print(f"  - API Docs: http://{host}:{port}/docs")
    uvicorn.run(api.app, host=host, port=port, log_level=config.log_level.lower())


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Lecture attendance and evaluation simulator")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--seed", type=int, help="Seed for the random draws")
    parser.add_argument("--serve", action="store_true", help="Serve the REST API instead of running once")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="REST server host")
    parser.add_argument("--port", type=int, default=8000, help="REST server port")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config, seed=args.seed)
    except ConfigurationError as e:
        print(f"✗ {e.message}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.serve:
        try:
            start_rest_server(config, args.host, args.port)
        except KeyboardInterrupt:
            print("\nShutting down...")
        return 0

    service = SimulationService(config=config, catalog=LectureCatalog())
    report = service.run()
    logger.debug("Outcome counts: %s", report.outcome_counts())
    return 0


if __name__ == "__main__":
    sys.exit(main())

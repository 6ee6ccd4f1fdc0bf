"""Application entry point for the Color Sense Quiz."""

from __future__ import annotations

import argparse

from color_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from color_quiz.core.quiz_manager import QuizManager
from color_quiz.server.api_server import run_api_server
from color_quiz.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-quiz",
        description="Serve the Color Sense Quiz to a web browser.",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help=f"Interface to bind (default: {DEFAULT_HOST})")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help=f"Port to listen on (default: {DEFAULT_PORT})")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Initialize logging and serve the quiz page until interrupted."""
    args = _build_parser().parse_args(argv)
    logger = configure_logging()
    logger.info("Starting Color Sense Quiz…")

    quiz_manager = QuizManager()
    logger.info("Quiz page available at http://%s:%d/", args.host, args.port)
    run_api_server(quiz_manager=quiz_manager, host=args.host, port=args.port)


if __name__ == "__main__":
    main()

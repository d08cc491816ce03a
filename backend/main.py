from __future__ import annotations

import argparse
import logging

import uvicorn

from core.config import RuleOptions
from server.app import create_app


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the checkers rules engine API.")
	parser.add_argument("--host", default="127.0.0.1", help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=8000, help="Port for the API server.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default="info", help="Log level for the engine and uvicorn.")
	parser.add_argument(
		"--no-edge-guard",
		action="store_true",
		help="Offer chain jumps from rows 2 and 7 even without a capture leading inward.",
	)
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	logging.basicConfig(
		level=args.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	if args.reload:
		# The reloader imports the app by path, so rule flags cannot be passed through.
		uvicorn.run("server.app:app", host=args.host, port=args.port, reload=True, log_level=args.log_level)
		return
	app = create_app(RuleOptions(edge_chain_guard=not args.no_edge_guard))
	uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
	main()

from __future__ import annotations

import argparse
import json
import logging
import sys

import uvicorn

from structviz.config import ResolveConfig
from structviz.errors import GoSyntaxError, ResolutionError
from structviz.loader import load_package


EXIT_RESOLUTION = 2
EXIT_SYNTAX = 3


def configure_logging(verbose: bool) -> None:
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format="%(asctime)s - %(levelname)s - %(message)s",
		stream=sys.stderr,
	)


def cmd_extract(args: argparse.Namespace) -> int:
	config = ResolveConfig.from_env(include_tests=args.include_tests)
	try:
		package = load_package(args.package, args.base_dir, config)
	except ResolutionError as e:
		print(f"error: {e}", file=sys.stderr)
		return EXIT_RESOLUTION
	except GoSyntaxError as e:
		print(f"error: {e}", file=sys.stderr)
		return EXIT_SYNTAX
	print(json.dumps(package.model_dump(mode="json"), indent=2))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="structviz")
	parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pe = sub.add_parser("extract", help="Extract the class model of a Go package and print it as JSON")
	pe.add_argument("package", help="Import path or directory of the package")
	pe.add_argument("--base-dir", default=".", help="Directory import paths are resolved from")
	pe.add_argument("--include-tests", action="store_true", help="Also read _test.go files")
	pe.set_defaults(func=cmd_extract)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> None:
	args = build_parser().parse_args(argv)
	configure_logging(args.verbose)
	sys.exit(args.func(args))


if __name__ == "__main__":
	main()

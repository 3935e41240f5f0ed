from __future__ import annotations

import logging
import os
import re
from typing import Iterator, List, Optional, Tuple

from .config import ResolveConfig
from .errors import ResolutionError


logger = logging.getLogger(__name__)

_MODULE_RE = re.compile(r"^\s*module\s+\"?([^\s\"]+)\"?", re.M)


def is_local_import(import_path: str) -> bool:
	return (
		import_path in (".", "..")
		or import_path.startswith(("./", "../"))
		or os.path.isabs(import_path)
	)


def find_module_root(start_dir: str) -> Optional[Tuple[str, str]]:
	"""Return (module_dir, module_path) of the nearest go.mod at or above start_dir."""
	cursor = os.path.abspath(start_dir)
	while True:
		gomod = os.path.join(cursor, "go.mod")
		if os.path.isfile(gomod):
			with open(gomod, "r", encoding="utf-8") as fh:
				match = _MODULE_RE.search(fh.read())
			if match:
				return cursor, match.group(1)
		parent = os.path.dirname(cursor)
		if parent == cursor:
			return None
		cursor = parent


def _candidate_dirs(import_path: str, base_dir: str, config: ResolveConfig) -> Iterator[str]:
	rel = import_path.replace("/", os.sep)
	module = find_module_root(base_dir)
	if module:
		module_dir, module_path = module
		if import_path == module_path:
			yield module_dir
		elif import_path.startswith(module_path + "/"):
			yield os.path.join(module_dir, import_path[len(module_path) + 1 :].replace("/", os.sep))
		yield os.path.join(module_dir, "vendor", rel)
	if config.goroot:
		yield os.path.join(config.goroot, "src", rel)
	for entry in config.gopath:
		yield os.path.join(entry, "src", rel)


def resolve_package_dir(import_path: str, base_dir: str = ".", config: Optional[ResolveConfig] = None) -> str:
	config = config or ResolveConfig.from_env()
	if not import_path:
		raise ResolutionError(import_path, "empty import path")

	if is_local_import(import_path):
		path = os.path.abspath(os.path.join(base_dir, import_path))
		if os.path.isdir(path):
			logger.debug("resolved %s to local directory %s", import_path, path)
			return path
		raise ResolutionError(import_path, "cannot find package")

	for candidate in _candidate_dirs(import_path, base_dir, config):
		if os.path.isdir(candidate):
			logger.debug("resolved %s to %s", import_path, candidate)
			return os.path.abspath(candidate)
		logger.debug("no package %s at %s", import_path, candidate)
	raise ResolutionError(import_path, "cannot find package")


def is_go_source(filename: str, include_tests: bool = False) -> bool:
	if not filename.endswith(".go") or filename.startswith((".", "_")):
		return False
	return include_tests or not filename.endswith("_test.go")


def list_go_files(package_dir: str, include_tests: bool = False) -> List[str]:
	files: List[str] = []
	for entry in sorted(os.listdir(package_dir)):
		path = os.path.join(package_dir, entry)
		if os.path.isfile(path) and is_go_source(entry, include_tests):
			files.append(path)
	return files

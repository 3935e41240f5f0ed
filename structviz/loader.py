from __future__ import annotations

import logging
from typing import Optional

from .config import ResolveConfig
from .errors import ResolutionError
from .extract import extract_package
from .fs_scan import list_go_files, resolve_package_dir
from .go_parse import parse_go_files
from .model import Package


logger = logging.getLogger(__name__)


def load_package(import_path: str, base_dir: str = ".", config: Optional[ResolveConfig] = None) -> Package:
	"""Locate, parse and extract a Go package.

	Resolution and parse failures are raised before any class is extracted,
	so callers never see a partial Package.
	"""
	config = config or ResolveConfig.from_env()
	package_dir = resolve_package_dir(import_path, base_dir, config)
	paths = list_go_files(package_dir, include_tests=config.include_tests)
	if not paths:
		raise ResolutionError(import_path, "no Go files in " + package_dir)

	sources = parse_go_files(paths)
	package = extract_package(import_path, sources)
	logger.debug("extracted %d classes from %s", len(package.classes), import_path)
	return package

from __future__ import annotations

import os
from typing import List, Optional

from pydantic import BaseModel


def _default_gopath() -> List[str]:
	return [os.path.join(os.path.expanduser("~"), "go")]


class ResolveConfig(BaseModel):
	goroot: Optional[str] = None
	gopath: List[str] = []
	include_tests: bool = False

	@classmethod
	def from_env(cls, include_tests: bool = False) -> "ResolveConfig":
		gopath_env = os.environ.get("GOPATH", "")
		gopath = [p for p in gopath_env.split(os.pathsep) if p] or _default_gopath()
		return cls(
			goroot=os.environ.get("GOROOT") or None,
			gopath=gopath,
			include_tests=include_tests,
		)

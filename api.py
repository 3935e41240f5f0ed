from __future__ import annotations

import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from structviz.config import ResolveConfig
from structviz.errors import GoSyntaxError, ResolutionError
from structviz.loader import load_package
from structviz.model import Package


app = FastAPI(title="Go Struct Class Model")


class ExtractRequest(BaseModel):
	package: str
	base_dir: str = "."
	include_tests: bool = False


@app.post("/extract", response_model=Package)
def extract(req: ExtractRequest) -> Package:
	base_dir = os.path.abspath(req.base_dir)
	if not os.path.isdir(base_dir):
		raise HTTPException(status_code=400, detail=f"Invalid base_dir: {base_dir}")

	config = ResolveConfig.from_env(include_tests=req.include_tests)
	try:
		return load_package(req.package, base_dir, config)
	except ResolutionError as e:
		raise HTTPException(status_code=404, detail=str(e))
	except GoSyntaxError as e:
		problems = [{"path": path, "line": line, "column": col} for path, line, col in e.problems]
		raise HTTPException(status_code=422, detail=problems)


def create_app() -> FastAPI:
	return app

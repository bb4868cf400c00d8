"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from userhub import deps
from userhub.api import ops
from userhub.api import router as users_router
from userhub.api.errors import install_error_handlers
from userhub.domain.users.repo import ensure_schema
from userhub.infra import postgres
from userhub.obs import init as obs_init
from userhub.settings import settings

_LOG = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
	uses_postgres = settings.user_store_backend == "postgres"
	if uses_postgres:
		pool = await postgres.init_pool()
		await ensure_schema(pool)
	_LOG.info(
		"userhub.startup",
		extra={"store": settings.user_store_backend, "search": settings.search_backend},
	)
	try:
		yield
	finally:
		await deps.shutdown()
		if uses_postgres:
			await postgres.close_pool()


def create_app() -> FastAPI:
	app = FastAPI(title="userhub", lifespan=lifespan)
	obs_init(app)
	install_error_handlers(app)
	app.include_router(ops.router)
	app.include_router(users_router)
	return app


app = create_app()

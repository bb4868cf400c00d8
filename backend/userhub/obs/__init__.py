"""Observability package bootstrap."""

from __future__ import annotations

from fastapi import FastAPI

from userhub.obs import logging as obs_logging
from userhub.obs import middleware
from userhub.settings import settings


def init(app: FastAPI) -> None:
	if not settings.obs_enabled:
		return
	obs_logging.configure_logging()
	middleware.install(app)


__all__ = ["init"]

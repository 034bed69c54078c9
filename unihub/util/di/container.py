"""Container construction and FastAPI wiring."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from unihub.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are read from the environment when first requested.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to an app so routes can use ``FromDishka``."""
    setup_dishka(container, app)


@asynccontextmanager
async def close_container_on_shutdown(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan closing the app's container, which disposes the database engine."""
    yield
    await app.state.dishka_container.close()
    logfire.info("DI container closed")

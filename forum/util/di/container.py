"""Production container and FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with the production implementation of every component."""
    providers = [get_provider(base)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to REQUEST-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Let ``FromDishka[...]`` route parameters resolve from ``container``."""
    setup_dishka(container, app)

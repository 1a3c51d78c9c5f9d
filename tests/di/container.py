"""Container for tests, with fakes for every component by default."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from forum.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where components use their mock providers.

    Settings still come from the environment.

    Args:
        unmock: Components to run with their production providers instead,
            e.g. ``{"persistence"}`` against a running Postgres

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    components = {
        base.__mock_component__ for base in PROVIDERS if base.__mock_component__
    }
    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    # Same FastapiProvider as production so TestClient apps can share it
    return make_async_container(*providers, FastapiProvider())

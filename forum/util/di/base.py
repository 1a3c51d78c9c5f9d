"""Provider base class and component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for in-memory fakes
Component = Literal["persistence", "pusher"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A component base sets ``__mock_component__``; its subclasses set
    ``__is_mock__`` to say whether they are the fake or the real thing.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

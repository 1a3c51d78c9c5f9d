"""Pusher notification adapter."""

from .client import (
    MockPusherPublisher,
    PusherPublisher,
    RealPusherPublisher,
)

__all__ = ["PusherPublisher", "RealPusherPublisher", "MockPusherPublisher"]

"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class NotificationTransportError(ProviderError):
    """Real-time notification provider rejected or failed a publish."""

    pass

"""Error message helpers shared by the fetcher and the scrape pipeline."""


def describe_error(exc: BaseException) -> str:
    """Message for an exception, falling back to its class name."""
    return str(exc) or type(exc).__name__

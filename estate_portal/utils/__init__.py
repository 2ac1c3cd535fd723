"""Small helpers shared by the services and the web layer."""

__all__ = [
    "asyncio_utils",
    "fs",
]

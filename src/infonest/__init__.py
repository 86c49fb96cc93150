"""InfoNest campus core public surface."""

__all__ = [
    "domain",
    "infrastructure",
    "ports",
    "routers",
    "schemas",
    "services",
]

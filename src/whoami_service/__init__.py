"""Who-am-I service: describes the calling client from its request headers."""

__version__ = "1.0.0"

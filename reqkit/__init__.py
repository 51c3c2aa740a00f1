"""Formatting and sniffing helpers for an HTTP API client.

The helpers live in `reqkit.domain`; `reqkit.main` serves them over HTTP.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("reqkit")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

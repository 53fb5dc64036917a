"""Construction of long-lived outbound HTTP clients."""

import httpx

from voicenote_common.config import HttpClientConfig


def build_http_client(
    config: HttpClientConfig,
    base_url: str = "",
    headers: dict[str, str] | None = None,
) -> httpx.Client:
    """
    Creates one pooled HTTP client for a downstream dependency.

    The client is created once by a service's composition root and shared by
    all request threads; ``httpx.Client`` is safe for concurrent use.
    """
    timeout = httpx.Timeout(
        connect=config.connect_timeout,
        read=config.read_timeout,
        write=config.write_timeout,
        pool=config.pool_timeout,
    )
    return httpx.Client(base_url=base_url, headers=headers, timeout=timeout)


def call_timeout(config: HttpClientConfig, read_timeout: float) -> httpx.Timeout:
    """Per-call timeout that keeps the short connect timeout but bounds the read."""
    return httpx.Timeout(
        connect=min(config.connect_timeout, read_timeout),
        read=read_timeout,
        write=min(config.write_timeout, read_timeout),
        pool=min(config.pool_timeout, read_timeout),
    )

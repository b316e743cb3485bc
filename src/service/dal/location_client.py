"""
checkip.amazonaws.com implementation of the location lookup.

A single httpx client is created per execution context and reused across
invocations to avoid per-call connection setup.
"""

from typing import Optional

import httpx

from service.dal import BaseLocationLookup
from service.handlers.utils.observability import logger

CHECK_IP_URL = 'http://checkip.amazonaws.com/'
USER_AGENT = 'AWS Lambda Python Client'


def create_http_client(transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """
    Create the shared HTTP client used for outbound calls.

    The default ``Accept`` header is cleared and a fixed ``User-Agent`` is sent.

    Args:
        transport: Optional transport override, used by tests

    Returns:
        Configured httpx client
    """
    client = httpx.Client(headers={'User-Agent': USER_AGENT}, transport=transport)
    del client.headers['Accept']
    return client


class CheckIpClient(BaseLocationLookup):
    """Location lookup backed by the AWS checkip service."""

    def __init__(self, http_client: Optional[httpx.Client] = None, url: str = CHECK_IP_URL) -> None:
        self.http_client = http_client if http_client is not None else create_http_client()
        self.url = url

    def get_calling_ip(self) -> str:
        """
        Get the public IP address this function calls out from.

        Returns:
            Response body with newline characters removed

        Raises:
            httpx.HTTPStatusError: If checkip answers with a non-success status
            httpx.HTTPError: On any transport failure
        """
        response = self.http_client.get(self.url)
        response.raise_for_status()
        logger.info('Finished GetCallingIP')
        return response.text.replace('\n', '')

    def close(self) -> None:
        self.http_client.close()

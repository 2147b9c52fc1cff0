"""
HTTP character source for VTTScan.

Streams a remote VTT file with requests, so large or slow subtitle tracks
are scanned as they arrive instead of being downloaded up front. The request
is issued lazily on the first read.
"""

import logging
from typing import Iterator, Optional

import requests

from ..exceptions import VTTSourceError
from ..models import ReaderConfig
from .base import BufferedSource

logger = logging.getLogger(__name__)


class HTTPReader(BufferedSource):
    """
    Character source over an HTTP/HTTPS URL.

    Args:
        url: URL of the VTT file
        config: Chunk size, timeout, SSL verification and extra headers
        session: Optional requests.Session to issue the request with

    Raises:
        VTTSourceError: On connection failures, HTTP error statuses, or
            errors while streaming the body
    """

    def __init__(
        self,
        url: str,
        config: Optional[ReaderConfig] = None,
        session: Optional[requests.Session] = None
    ):
        super().__init__(config)
        self.url = url
        self._session = session
        self._response = None
        self._chunks: Optional[Iterator[bytes]] = None

    def _open(self) -> None:
        logger.info(f"Streaming VTT from URL: {self.url}")
        get = self._session.get if self._session is not None else requests.get
        response = None
        try:
            response = get(
                self.url,
                stream=True,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                headers=self.config.headers or None,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            # a streamed response holds its connection until closed
            if response is not None:
                response.close()
            logger.error(f"VTT request failed: {str(e)}")
            raise VTTSourceError(f"VTT download failed: {str(e)}") from e

        content_type = response.headers.get("Content-Type", "").lower()
        charset = ""
        if "charset=" in content_type:
            charset = content_type.split("charset=", 1)[1].split(";")[0].strip(' "')
        if charset and charset.replace("-", "") != "utf8":
            logger.warning(f"Server advertised charset {charset}; WebVTT is always UTF-8")

        self._response = response
        self._chunks = response.iter_content(chunk_size=self.config.chunk_size)

    def _read_chunk(self) -> bytes:
        if self._chunks is None:
            self._open()

        try:
            for chunk in self._chunks:
                # iter_content may yield empty keep-alive chunks
                if chunk:
                    return chunk
        except requests.RequestException as e:
            raise VTTSourceError(f"VTT stream interrupted: {str(e)}") from e
        return b""

    def close(self) -> None:
        if self._response is not None:
            self._response.close()
            self._response = None
        self._chunks = iter(())

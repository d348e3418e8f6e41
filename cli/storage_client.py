"""HTTP client for the blob server's discovery, upload, and signing handlers."""

import asyncio
import uuid
from typing import Optional

import httpx

from common.logging_config import get_logger
from common.types import BlobRef
from cli.config import Config

logger = get_logger(__name__)

DISCOVERY_CONTENT_TYPE = 'text/x-camli-configuration'


class StorageClientError(Exception):
    """Raised when the server cannot be reached or rejects a request."""
    pass


class HttpStorageClient:
    """
    Async HTTP client for a Perkeep-style blob server.

    Implements both the storage and the signer interfaces of the share core.
    Handler locations are read once from the server's discovery document.
    """

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize storage client.

        Args:
            config: Configuration instance
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.config = config
        headers = {}
        token = config.get_auth_token()
        if token:
            headers['Authorization'] = f'Token {token}'
        self.session = httpx.AsyncClient(
            base_url=config.get_server_url(),
            timeout=config.get_timeout(),
            headers=headers,
            transport=transport
        )
        self._discovery: Optional[dict] = None
        self._discovery_lock = asyncio.Lock()
        logger.info(f"Initialized HttpStorageClient [base_url={config.get_server_url()}]")

    async def close(self) -> None:
        await self.session.aclose()

    async def __aenter__(self) -> 'HttpStorageClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request_with_retry(
        self,
        method: str,
        endpoint: str,
        max_retries: Optional[int] = None,
        **kwargs
    ) -> httpx.Response:
        """
        Make HTTP request with retry logic on 5xx errors and network failures.

        Args:
            method: HTTP method (GET, POST)
            endpoint: Server path
            max_retries: Max retry attempts (uses config default if None)
            **kwargs: Additional arguments to pass to httpx request

        Returns:
            HTTP response object

        Raises:
            StorageClientError: If the server cannot be reached after all attempts
        """
        retry_config = self.config.get_retry_config()
        max_retries = max_retries if max_retries is not None else retry_config['max_retries']
        backoff = retry_config['retry_backoff_multiplier']

        request_id = str(uuid.uuid4())
        headers = kwargs.pop('headers', None) or {}
        headers['X-Request-ID'] = request_id

        logger.debug(f"Making request: {method} {endpoint} [request_id={request_id}]")

        last_exception = None
        for attempt in range(max_retries + 1):
            try:
                response = await self.session.request(method, endpoint, headers=headers, **kwargs)

                logger.debug(
                    f"Response received: {method} {endpoint} status={response.status_code} [request_id={request_id}]"
                )

                if response.status_code >= 500 and attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Server error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {endpoint} status={response.status_code}, retrying in {delay}s [request_id={request_id}]"
                    )
                    await asyncio.sleep(delay)
                    continue

                return response

            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                if attempt < max_retries:
                    delay = backoff ** attempt
                    logger.warning(
                        f"Network error (attempt {attempt + 1}/{max_retries + 1}): "
                        f"{method} {endpoint} error={type(e).__name__}, retrying in {delay}s [request_id={request_id}]"
                    )
                    await asyncio.sleep(delay)

        logger.error(
            f"Network error (max retries exceeded): {method} {endpoint} error={last_exception} [request_id={request_id}]"
        )
        if isinstance(last_exception, httpx.TimeoutException):
            raise StorageClientError("Request timed out. Server may be overloaded.") from last_exception
        raise StorageClientError("Cannot connect to blob server. Is it running?") from last_exception

    def _raise_for_status(self, response: httpx.Response, action: str) -> None:
        if response.status_code >= 400:
            detail = response.text[:200] if response.text else 'no details'
            raise StorageClientError(f"{action} failed with status {response.status_code}: {detail}")

    async def discover(self) -> dict:
        """
        Fetch and cache the server's discovery document.

        Returns:
            Discovery dictionary with blobRoot, shareRoot and signing entries
        """
        async with self._discovery_lock:
            if self._discovery is None:
                response = await self._request_with_retry(
                    'GET',
                    '/',
                    params={'camli.mode': 'config'},
                    headers={'Accept': DISCOVERY_CONTENT_TYPE}
                )
                self._raise_for_status(response, "Discovery")
                try:
                    self._discovery = response.json()
                except ValueError as e:
                    raise StorageClientError(f"Discovery returned invalid JSON: {e}") from e
                logger.debug(f"Discovery loaded [keys={sorted(self._discovery)}]")
            return self._discovery

    async def _signing_entry(self, key: str) -> str:
        signing = (await self.discover()).get('signing') or {}
        value = signing.get(key)
        if not value:
            raise StorageClientError(f"Server discovery has no signing {key}")
        return value

    async def get_server_identity_ref(self) -> BlobRef:
        raw = await self._signing_entry('publicKeyBlobRef')
        ref = BlobRef.parse(raw)
        if ref is None:
            raise StorageClientError(f"Server advertised an invalid public key ref: {raw!r}")
        return ref

    async def get_share_root_path(self) -> str:
        share_root = (await self.discover()).get('shareRoot')
        if not share_root:
            raise StorageClientError("Server has no share handler")
        return share_root

    async def upload(self, data: bytes) -> BlobRef:
        """
        Upload one blob through the server's multipart upload handler.

        Args:
            data: Blob contents

        Returns:
            The blob's sha224 ref
        """
        blob_root = (await self.discover()).get('blobRoot')
        if not blob_root:
            raise StorageClientError("Server discovery has no blobRoot")

        ref = BlobRef.for_bytes(data)
        response = await self._request_with_retry(
            'POST',
            f"{blob_root}camli/upload",
            files={str(ref): (str(ref), data, 'application/octet-stream')}
        )
        self._raise_for_status(response, f"Upload of {ref}")

        try:
            received = response.json().get('received') or []
        except ValueError as e:
            raise StorageClientError(f"Upload of {ref} returned invalid JSON: {e}") from e
        if not any(entry.get('blobRef') == str(ref) for entry in received):
            raise StorageClientError(f"Server did not acknowledge upload of {ref}")

        logger.debug(f"Uploaded blob {ref} [size={len(data)}]")
        return ref

    async def sign(self, payload: bytes) -> bytes:
        """
        Have the server sign a JSON claim. Not retried.

        Args:
            payload: Unsigned JSON claim

        Returns:
            Signed claim bytes, as returned by the server
        """
        sign_handler = await self._signing_entry('signHandler')
        response = await self._request_with_retry(
            'POST',
            sign_handler,
            max_retries=0,
            data={'json': payload.decode('utf-8')}
        )
        self._raise_for_status(response, "Signing")
        return response.content

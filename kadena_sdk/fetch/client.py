"""
ApiClient - HTTP client for a chain's Pact API.
"""
import json
import logging
import urllib.parse
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from kadena_sdk.exceptions import ApiError, FetchError, NetworkError
from kadena_sdk.fetch.config import ApiConfig
from kadena_sdk.pact.command import Command


class ApiClient:
    """
    Client for the Pact API of a single chain.

    Commands are posted exactly as prepared:
    - local: dry-run the command on the node without submitting it
    - send: submit the command to the network
    """

    def __init__(
        self,
        config: ApiConfig,
        retry_count: int = 3,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the ApiClient

        Args:
            config: Endpoint configuration
            retry_count: Number of retries on 5xx responses and connection errors
            session: Optional pre-configured requests session
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If the host doesn't use https (unless it's localhost/127.0.0.1)
        """
        parsed = urllib.parse.urlparse(config.host)
        host = parsed.hostname or ""
        is_local = host in ("localhost", "127.0.0.1")
        if parsed.scheme != "https" and not is_local:
            raise ValueError(f"host must use https:// for security (got: {parsed.scheme}://)")

        self.config = config
        self.host = config.host.rstrip("/")
        self.timeout = config.timeout
        self.logger = logger or logging.getLogger(__name__)

        if session is None:
            session = requests.Session()
            retries = Retry(
                total=retry_count,
                backoff_factor=0.5,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=["GET", "POST"],
                raise_on_status=False,
                connect=retry_count,
                read=retry_count,
                other=retry_count
            )
            session.mount("http://", HTTPAdapter(max_retries=retries))
            session.mount("https://", HTTPAdapter(max_retries=retries))
        self.session = session

    def local(self, cmd: Command) -> Dict[str, Any]:
        """
        Execute a command locally on the node without sending it to the chain

        Args:
            cmd: The prepared command

        Returns:
            Parsed JSON response

        Raises:
            ApiError: If the node rejects the request
            NetworkError: If the node cannot be reached
        """
        url = f"{self.host}/api/v1/local"
        payload = cmd.to_request()
        self.logger.debug(f"Sending local request to {url}: {self._sanitize_payload(payload)}")
        return self._execute_request(url, payload)

    def send(self, cmd: Command) -> Dict[str, Any]:
        """
        Submit a command to the blockchain

        Args:
            cmd: The prepared command

        Returns:
            Parsed JSON response, normally {"requestKeys": [...]}

        Raises:
            ApiError: If the node rejects the request
            NetworkError: If the node cannot be reached
        """
        url = f"{self.host}/api/v1/send"
        if not cmd.is_fully_signed:
            self.logger.warning(
                f"Sending command {cmd.hash} with missing signatures for signers {list(cmd.missing_signers)}"
            )
        payload = {"cmds": [cmd.to_request()]}
        self.logger.debug(f"Sending transaction to {url}: {self._sanitize_payload(payload)}")
        return self._execute_request(url, payload)

    def _execute_request(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {}
        if self.config.api_key:
            headers["X-API-Key"] = self.config.api_key

        try:
            response = self.session.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error(f"Request to {url} failed: {e}")
            raise NetworkError(f"Request to {url} failed: {str(e)}") from e

        if not response.ok:
            self.logger.error(f"API error {response.status_code}: {response.text}")
            raise ApiError(
                f"API error {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text
            )

        try:
            result = response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON response from {url}: {e}")
            raise FetchError(f"Invalid JSON response from {url}: {str(e)}") from e

        self.logger.debug(f"Received response: {result}")
        return result

    def _sanitize_payload(self, payload: Dict[str, Any]) -> str:
        """
        Render a request body for logging with signatures redacted

        Args:
            payload: Request body

        Returns:
            JSON text safe to log
        """
        def redact(envelope):
            env = dict(envelope)
            env["sigs"] = [
                {"sig": f"[REDACTED - {len(str(s.get('sig', '')))} chars]"}
                for s in env.get("sigs", [])
            ]
            return env

        if "cmds" in payload:
            safe = {"cmds": [redact(env) for env in payload["cmds"]]}
        else:
            safe = redact(payload)
        return json.dumps(safe)

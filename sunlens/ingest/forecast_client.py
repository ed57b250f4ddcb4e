"""Dark Sky compatible forecast API client."""

import logging

import httpx

logger = logging.getLogger(__name__)

DARKSKY_BASE_URL = "https://api.darksky.net"
DEFAULT_USER_AGENT = "sunlens/0.1.0"


class ForecastClientError(Exception):
    """Raised when the forecast API cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ForecastClient:
    """Fetches a single forecast per call. Failed requests are not retried."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DARKSKY_BASE_URL,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    def get_forecast(
        self,
        latitude: float,
        longitude: float,
        units: str = "auto",
        language: str = "en",
    ) -> dict:
        url = f"{self.base_url}/forecast/{self.api_key}/{latitude:.5f},{longitude:.5f}"
        params = {"units": units, "lang": language}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        logger.info("Requesting forecast for %.5f,%.5f", latitude, longitude)
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            raise ForecastClientError(f"Problem talking to forecast API: {e}") from e

        if resp.status_code >= 400:
            logger.error("Forecast API %d: %s", resp.status_code, resp.text[:200])
            raise ForecastClientError(
                f"Forecast API returned {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise ForecastClientError(
                f"Problem parsing forecast API response: {e}",
                status_code=resp.status_code,
            ) from e

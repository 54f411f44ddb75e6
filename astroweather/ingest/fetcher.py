"""Single-shot JSON GET with transport and schema validation."""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from astroweather.config.schema import DEFAULT_USER_AGENT
from astroweather.errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def fetch_json(
    url: str,
    model: type[ModelT],
    *,
    timeout: float = 30.0,
    user_agent: str = DEFAULT_USER_AGENT,
) -> ModelT:
    """GET ``url`` once and decode the body into ``model``.

    Raises TransportError on network failure or a non-200 status and
    DecodeError when the body is not JSON of the expected shape.
    """
    headers = {"Content-Type": "application/json", "User-Agent": user_agent}
    logger.debug("GET %s", url)
    try:
        resp = httpx.get(url, headers=headers, timeout=timeout)
    except httpx.RequestError as e:
        logger.debug("Request to %s failed: %s", url, e)
        raise TransportError(f"making request to {url}: {e}") from e

    if resp.status_code != httpx.codes.OK:
        logger.debug("%s returned status %d", url, resp.status_code)
        raise TransportError(f"unexpected status code: {resp.status_code}")

    try:
        return model.model_validate_json(resp.content)
    except ValidationError as e:
        logger.debug("Could not decode %s response: %s", model.__name__, e)
        raise DecodeError(f"parsing JSON: {e}") from e

"""Authenticated JSON GET with typed decoding."""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from tts_bootstrap.exceptions import DecodeError, HttpStatusError

T = TypeVar("T")


def decode_response(response: httpx.Response, model_type: type[T]) -> T:
    """Check the status of a received response and decode its JSON body.

    Raises HttpStatusError for any non-2xx status and DecodeError when the
    body is not JSON or does not validate against ``model_type``.
    """
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise HttpStatusError(
            response.request.method, str(response.url), response.status_code,
        ) from exc

    try:
        return TypeAdapter(model_type).validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(str(response.url), str(exc)) from exc


async def fetch_json(
    client: httpx.AsyncClient,
    url: httpx.URL | str,
    auth_header: str,
    model_type: type[T],
) -> T:
    """GET ``url`` with ``Authorization: auth_header`` and decode the body.

    No retries. Transport errors propagate as raised by httpx.
    """
    response = await client.get(url, headers={"Authorization": auth_header})
    return decode_response(response, model_type)

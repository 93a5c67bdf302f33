"""
Envelope to HTTP status mapping.

Services report failures inside the envelope (status=False) instead of
raising. Routers still want a meaningful HTTP status, so they pass the
FastAPI Response object and the envelope through apply_envelope_status().
The body is always the envelope itself.
"""

from fastapi import Response, status

from app.schemas import ResponseModel


def apply_envelope_status(
    response: Response,
    envelope: ResponseModel,
    success_code: int = status.HTTP_200_OK,
) -> ResponseModel:
    """
    Set the HTTP status code from the envelope and return the envelope.

    Args:
        response: The Response injected by FastAPI into the route
        envelope: Result returned by a service
        success_code: Status to use when envelope.status is True

    Returns:
        The same envelope, so routes can `return apply_envelope_status(...)`
    """
    response.status_code = success_code if envelope.status else status.HTTP_404_NOT_FOUND
    return envelope

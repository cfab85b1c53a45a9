"""Problem-details responses shared by the router and the app."""

from __future__ import annotations

from starlette.responses import JSONResponse

VALIDATION_TITLE = "One or more validation errors occurred."
SERVER_ERROR_TITLE = "An error occurred while processing your request."


def validation_problem(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "type": "https://tools.ietf.org/html/rfc9110#section-15.5.1",
            "title": VALIDATION_TITLE,
            "status": 400,
            "errors": errors,
        },
    )


def server_error_problem() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "type": "https://tools.ietf.org/html/rfc9110#section-15.6.1",
            "title": SERVER_ERROR_TITLE,
            "status": 500,
        },
    )

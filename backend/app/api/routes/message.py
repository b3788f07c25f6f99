"""Greeting endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING_MESSAGE = "<h1> Hello Devops Justos </h1>"

router = APIRouter(prefix="/message", tags=["message"])


@router.get("", response_class=PlainTextResponse)
def return_message() -> str:
    return GREETING_MESSAGE

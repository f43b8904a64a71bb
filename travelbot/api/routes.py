from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .ChatSchemas import ChatRequest, ChatResponse, ErrorResponse
from ..prompts.ChatTemplates import ChatReplies
from ..services import messageRouter
from ..services.errors import TravelBotError
from ..settings.config import settings
from ..settings.logging import app_logger

app = FastAPI(
    title="TravelBot API", description="Chat endpoint for flight offers, destination images and travel questions"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


def error_response(message: str, code: str) -> JSONResponse:
    body = ErrorResponse(error=ChatReplies.ERROR_TEMPLATE.format(error=message), code=code)
    return JSONResponse(status_code=500, content=body.model_dump())


@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError):
    app_logger.error("Rejected malformed chat request: %s", exc.errors())
    return error_response("el cuerpo debe incluir un campo 'message' de tipo texto.", "invalid_request")


@app.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
def chat(payload: ChatRequest):
    app_logger.info("Received chat message: %s", payload.message)

    try:
        response = messageRouter.message_router.route(payload.message)
    except TravelBotError as e:
        app_logger.error("Chat request failed [%s]: %s (%s)", e.code, e.message, e.payload)
        return error_response(e.message, e.code)
    except Exception as e:
        app_logger.exception("Unexpected error while handling chat message")
        return error_response(str(e), TravelBotError.code)

    return response


@app.get("/")
async def read_root():
    return {"message": "TravelBot API is running"}

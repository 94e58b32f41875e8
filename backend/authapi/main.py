# authapi/main.py
import logging
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from authapi.config import ConfigError, settings
from authapi.core.errors import AuthWorkflowError
from authapi.stores import build_user_store

from authapi.api.routers import auth

logger = logging.getLogger("uvicorn.error")

MSG_BAD_REQUEST = "Requisição inválida"
MSG_INTERNAL = "Erro interno do servidor"

app = FastAPI(title=settings.APP_NAME)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthWorkflowError)
async def auth_workflow_error_handler(request: Request, exc: AuthWorkflowError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Non-object bodies and wrongly typed fields; missing fields are left to the workflow
    return JSONResponse(status_code=400, content={"error": MSG_BAD_REQUEST})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("[app] unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": MSG_INTERNAL})


@app.on_event("startup")
async def on_startup():
    # Missing secret or credentials abort startup
    settings.check()
    store = build_user_store(settings)
    # An unreachable database raises here and uvicorn exits non-zero
    await store.connect()
    app.state.user_store = store


@app.on_event("shutdown")
async def on_shutdown():
    store = getattr(app.state, "user_store", None)
    if store is not None:
        await store.close()


# REST
app.include_router(auth.router)


@app.get("/")
def index():
    return {"message": "API está funcionando!"}


def run() -> None:
    """Console entry point: validate configuration, then serve with uvicorn."""
    try:
        settings.check()
    except ConfigError as exc:
        logger.error("[config] %s", exc)
        sys.exit(1)
    uvicorn.run(
        "authapi.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()

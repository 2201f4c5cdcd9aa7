import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import config

from .api import members
from .db import setup_db
from .media import setup_media


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # error bodies follow the shape the front-end reads: message + error flag
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail, "error": True},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # e.g. "Invalid request body: body.id: Input should be a valid string"
    errors = "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors())
    return JSONResponse(
        status_code=422,
        content={"message": f"Invalid request body: {errors}", "error": True},
    )


def create_app():
    app = FastAPI(
        title="Members-API",
        version="0.1",
        description="""Members API.
        List, create, update and delete member records and their profile images""",
        docs_url="/",
    )

    # Fetch config object
    env = os.getenv("API_ENV", "default")
    app.config = config[env]

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app.config.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Routers
    app.include_router(members.router, prefix="/api/membersData", tags=["members"])

    setup_db(app)
    setup_media(app)

    return app

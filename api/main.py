# api/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.exceptions import ReferenceNotFoundError, InvalidPageRequestError
from core.sa.database import db
from api.routes import libraries, books

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database on startup
    db.init_db()
    yield
    db.dispose()

app = FastAPI(
    title="Library Catalog API",
    description="CRUD and paginated listing for libraries and their books.",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Absence of a target or referenced entity is always 422, never 404
@app.exception_handler(ReferenceNotFoundError)
async def reference_not_found_handler(request: Request, exc: ReferenceNotFoundError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)}
    )

@app.exception_handler(InvalidPageRequestError)
async def invalid_page_request_handler(request: Request, exc: InvalidPageRequestError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message}
    )

# Malformed bodies and parameters are client errors (400), 422 is reserved for absence
@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())}
    )

app.include_router(libraries.router)
app.include_router(books.router)

@app.get("/")
async def root():
    return {"status": "ok", "version": app.version}

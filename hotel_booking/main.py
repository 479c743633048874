"""
Hotel Booking application entry point
Every error leaves the API as {"error": "..."} with an HTTP status code
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from hotel_booking import __version__
from hotel_booking.config import settings
from hotel_booking.database import init_db
from hotel_booking.routers import auth, staff, customers, rooms, bookings

logger = logging.getLogger(__name__)


def setup_logging(level: str = settings.LOG_LEVEL):
    """Setup logging configuration"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup"""
    setup_logging()
    init_db()
    logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Role-based hotel reservation service",
    version=__version__,
    debug=settings.DEBUG,
    lifespan=lifespan
)


# ============== Error responses ==============

def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one message"""
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        # custom validators raise ValueError, which pydantic reports as "Value error, <msg>"
        message = error.get("msg", "Invalid value").removeprefix("Value error, ")
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request."


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": format_validation_errors(exc)}
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    detail = getattr(exc, "orig", None) or exc
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": f"Database error: {detail}"}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error."}
    )


# ============== Routes ==============

app.include_router(auth.router)
app.include_router(staff.router)
app.include_router(customers.router)
app.include_router(rooms.router)
app.include_router(bookings.router)


@app.get("/health")
def health_check():
    """Health check"""
    return {"status": "healthy"}

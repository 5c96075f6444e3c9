import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from hours_filler.api.fill_hours import router as fill_hours_router
from hours_filler.api.holidays import router as holidays_router
from hours_filler.core.config import settings
from hours_filler.core.holidays import build_static_holidays

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hours Filler",
    version="0.1.0",
    description="Fills Factorial HR attendance shifts for a date range (REST + httpx)",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup() -> None:
    # Year is fixed for the lifetime of the process
    app.state.holidays_year = settings.HOLIDAYS_YEAR
    app.state.static_holidays = build_static_holidays(settings.HOLIDAYS_YEAR)
    logger.info("Hours Filler ready (year=%s, api=%s)", settings.HOLIDAYS_YEAR, settings.FACTORIAL_API_URL)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Missing data in request."},
    )


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "service": "hours-filler",
    }


@app.get("/", include_in_schema=False)
async def root():
    return FileResponse(settings.PUBLIC_DIR / "index.html")


app.include_router(fill_hours_router)
app.include_router(holidays_router)

# Last, so it only catches what no route above matched
app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR), name="public")


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()

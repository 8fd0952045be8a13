from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shiftboard.core.config import settings
from shiftboard.core.logging import configure_logging
from shiftboard.routers.shifts import router as shifts_router

configure_logging(settings.log_level)

app = FastAPI(title="Shiftboard API")

app.add_middleware(
  CORSMiddleware,
  allow_origins=settings.allow_origins,
  allow_credentials=True,
  allow_methods=["*"],
  allow_headers=["*"],
)

app.include_router(shifts_router, prefix="/shifts", tags=["shifts"])

@app.get("/health")
def health():
  return {"status": "ok"}

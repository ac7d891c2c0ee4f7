"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status

from app.schemas import ExtractionResponse
from extraction.exceptions import DocumentError, DocumentFetchError
from services.fetcher import is_remote
from services.scraper import ScraperService, build_default_scraper

router = APIRouter()


def get_scraper() -> ScraperService:
    return build_default_scraper()


@router.post(
    "/extract",
    response_model=ExtractionResponse,
    summary="Extract readings from an uploaded dashboard page.",
)
async def extract_upload(
    file: UploadFile = File(..., description="HTML page containing the readings table."),
    scraper: ScraperService = Depends(get_scraper),
) -> ExtractionResponse:
    contents = await file.read()
    await file.close()
    if not contents:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded file is empty.",
        )
    try:
        report = scraper.extract_bytes(contents, source=file.filename)
    except DocumentError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return ExtractionResponse.from_report(report, source=file.filename)


@router.get(
    "/readings",
    response_model=ExtractionResponse,
    summary="Fetch a dashboard page and extract its readings.",
)
def read_remote(
    source: str = Query(..., description="http(s) URL of the dashboard page."),
    scraper: ScraperService = Depends(get_scraper),
) -> ExtractionResponse:
    if not is_remote(source):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only http and https sources are accepted.",
        )
    try:
        report = scraper.scrape(source)
    except DocumentFetchError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc
    except DocumentError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    return ExtractionResponse.from_report(report, source=source)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}

import asyncio

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import ParseTextRequest
from models.responses import DraftResponse, ParseResponse
from models.schemas.open_position import OpenPositionDraft
from models.schemas.parsed_document import ParsedDocument
from services import jd_parser, text_extractor
from services.errors import ExtractionFailed, UnsupportedFormat

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "supported_extensions": list(text_extractor.SUPPORTED_EXTENSIONS),
    }


async def _parse_upload(jd_file: UploadFile) -> ParsedDocument:
    filename = jd_file.filename or ""

    # Reject the file type before reading the body
    try:
        text_extractor.check_supported(filename)
    except UnsupportedFormat:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid file type. Allowed types: {', '.join(text_extractor.SUPPORTED_EXTENSIONS)}",
        )

    content = await jd_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        text = await asyncio.wait_for(
            asyncio.to_thread(text_extractor.extract_raw_text, content, filename),
            timeout=settings.extraction_timeout_seconds,
        )
    except asyncio.TimeoutError:
        raise HTTPException(status_code=504, detail="Timed out reading document")
    except ExtractionFailed:
        raise HTTPException(status_code=400, detail="Could not read document")

    return jd_parser.extract_fields(text)


@router.post("/parse-jd", response_model=ParseResponse)
@limiter.limit("10/minute")
async def parse_jd(request: Request, jd_file: UploadFile = File(...)):
    parsed = await _parse_upload(jd_file)
    return ParseResponse(data=parsed.to_payload())


@router.post("/parse-jd/text", response_model=ParseResponse)
@limiter.limit("10/minute")
async def parse_jd_text(request: Request, body: ParseTextRequest):
    parsed = jd_parser.extract_fields(body.text)
    return ParseResponse(data=parsed.to_payload())


@router.post("/draft-from-jd", response_model=DraftResponse)
@limiter.limit("10/minute")
async def draft_from_jd(
    request: Request,
    jd_file: UploadFile = File(...),
    document_id: str | None = Form(None),
):
    parsed = await _parse_upload(jd_file)
    return DraftResponse(
        data=OpenPositionDraft.from_parsed(parsed, document_id),
        parsed_fields=parsed.to_payload(),
    )

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from ..service import format_service
from .models import (
    CodeMirrorRequest,
    CodeMirrorResponse,
    ContentTypeRequest,
    ContentTypeResponse,
    FormatResponse,
    HashRequest,
    HashResponse,
    IdsResponse,
    JsonFormatRequest,
    XmlFormatRequest,
)

router = APIRouter()

@router.get("/ids", response_model=IdsResponse, summary="Mint random identifiers")
async def issue_ids(count: int = Query(1, description="How many ids to mint")) -> IdsResponse:
    try:
        ids = format_service.issue_ids(count=count)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error_code": "invalid_count", "error_message": str(e)},
        )
    return IdsResponse(ids=ids)


@router.post("/hash", response_model=HashResponse, summary="Short non-cryptographic hash")
async def hash_text(req: HashRequest) -> HashResponse:
    return HashResponse(hash=format_service.hash_text(text=req.text))


@router.post("/format/json", response_model=FormatResponse, summary="Re-serialize a JSON body")
async def format_json(req: JsonFormatRequest) -> FormatResponse:
    """Parse the body strictly and print it compact or 2-space indented."""
    out = format_service.format_json_body(text=req.text, indent=req.indent)
    return FormatResponse(**out)


@router.post("/format/xml", response_model=FormatResponse, summary="Pretty-print an XML body")
async def format_xml(req: XmlFormatRequest) -> FormatResponse:
    """Malformed XML surfaces as 422 invalid_xml via the app's FormatError handler."""
    out = format_service.format_xml_body(text=req.text, options=req.options)
    return FormatResponse(**out)


@router.post(
    "/format/codemirror",
    response_model=CodeMirrorResponse,
    summary="JSON5 object-body text for an editor buffer",
)
async def format_codemirror(req: CodeMirrorRequest) -> CodeMirrorResponse:
    return CodeMirrorResponse(**format_service.codemirror_body(value=req.value))


@router.post(
    "/content-type",
    response_model=ContentTypeResponse,
    summary="Classify the Content-Type header",
)
async def content_type(req: ContentTypeRequest) -> ContentTypeResponse:
    """Report JSON-like types as application/ld+json and XML-like as application/xml."""
    return ContentTypeResponse(content_type=format_service.sniff_content_type(headers=req.headers))

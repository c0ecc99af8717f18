from urllib.parse import quote

from fastapi import APIRouter, File, Form, Response, UploadFile

from models.responses import ErrorResponse, HealthResponse
from services import docx_writer, resume_converter

router = APIRouter(prefix="/api")


def _content_disposition(filename: str) -> str:
    if filename.isascii():
        return f'attachment; filename="{filename}"'
    return f"attachment; filename*=utf-8''{quote(filename)}"


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse()


@router.post(
    "/convert",
    response_class=Response,
    responses={
        200: {"content": {docx_writer.MEDIA_TYPE: {}}},
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def convert(
    resume: UploadFile | None = File(None),
    api_key: str | None = Form(None, alias="apiKey"),
):
    content = await resume.read() if resume is not None else None
    result = await resume_converter.convert(
        filename=resume.filename if resume is not None else None,
        content=content,
        content_type=resume.content_type if resume is not None else None,
        api_key=api_key,
    )
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": _content_disposition(result.filename)},
    )

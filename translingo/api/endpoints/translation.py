import logging

from fastapi import APIRouter, Depends

from translingo.core.config import Settings, get_settings
from translingo.core.errors import EmptyResult, GatewayError, InvalidRequest
from translingo.core.translator import AzureTranslator, get_translator
from translingo.models.translation import (
    CHAR_LIMIT,
    ErrorResponse,
    GatewayResponse,
    TranslateRequest,
    normalize_targets,
    shape_response,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/translate",
    response_model=GatewayResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def translate_text(
    request: TranslateRequest,
    settings: Settings = Depends(get_settings),
    translator: AzureTranslator = Depends(get_translator),
):
    text = request.text
    if not text:
        raise InvalidRequest(error="Text is required")
    if len(text) > CHAR_LIMIT:
        raise InvalidRequest(
            error=f"Text exceeds the {CHAR_LIMIT} character limit")

    targets = normalize_targets(request.to, settings.default_target_language)
    if not targets or not all(targets):
        raise InvalidRequest(error="At least one target language is required")

    # 源语言为空时不传 from，交给 Azure 自动检测
    source = request.from_language or None
    logger.info(f"Translating text: {text[:80]!r}")
    logger.info(f"Target languages: {targets}")
    logger.info(f"Source language: {source or 'auto-detect'}")

    try:
        translations = await translator.translate(text, targets, source)
    except GatewayError as e:
        logger.error(
            f"Translation failed for {text[:80]!r} -> {targets}: "
            f"{e.error} (status {getattr(e, 'upstream_status', 'n/a')})"
        )
        raise

    if not translations:
        logger.error(f"No translations received for {text[:80]!r} -> {targets}")
        raise EmptyResult(
            f"Translator returned no results for: {', '.join(targets)}")

    return shape_response(targets, translations)

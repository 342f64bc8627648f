from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

CHAR_LIMIT = 50000


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = None
    from_language: Optional[str] = Field(None, alias="from")
    to: Optional[Union[str, List[str]]] = None


class TranslationResult(BaseModel):
    text: str
    language: str


class SingleTranslationResponse(BaseModel):
    translation: str
    language: str


class MultiTranslationResponse(BaseModel):
    translations: List[TranslationResult]


GatewayResponse = Union[SingleTranslationResponse, MultiTranslationResponse]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


def normalize_targets(to, fallback: str) -> List[str]:
    if to is None:
        return [fallback]
    if isinstance(to, str):
        return [to]
    return list(to)


def shape_response(targets: List[str], translations: List[dict]) -> GatewayResponse:
    # 单目标语言保留旧版 {translation, language} 格式，兼容老客户端
    if len(targets) == 1:
        first = translations[0]
        return SingleTranslationResponse(
            translation=first.get("text") or "Translation error",
            language=first.get("to") or targets[0],
        )
    return MultiTranslationResponse(
        translations=[
            TranslationResult(text=t.get("text", ""), language=t.get("to", ""))
            for t in translations
        ]
    )


def parse_gateway_response(data, requested: List[str]) -> GatewayResponse:
    """Match a gateway payload against the shape expected for ``requested``.

    A single-target request prefers the legacy ``{translation, language}``
    shape; a multi-target request prefers ``{translations}``. The other shape
    is still accepted, so a payload carrying both keys resolves the same way
    every time. Returns ``None`` when neither shape fits.
    """
    if not isinstance(data, dict):
        return None

    def as_single():
        translation = data.get("translation")
        if isinstance(translation, str) and translation and len(requested) == 1:
            return SingleTranslationResponse(
                translation=translation, language=requested[0]
            )
        return None

    def as_multi():
        translations = data.get("translations")
        if isinstance(translations, list) and translations:
            try:
                return MultiTranslationResponse(translations=translations)
            except ValidationError:
                return None
        return None

    if len(requested) == 1:
        return as_single() or as_multi()
    return as_multi() or as_single()


def results_of(response: GatewayResponse) -> List[TranslationResult]:
    if isinstance(response, SingleTranslationResponse):
        return [TranslationResult(text=response.translation,
                                  language=response.language)]
    return list(response.translations)

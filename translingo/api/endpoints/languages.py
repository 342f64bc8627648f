from fastapi import APIRouter, Depends

from translingo.core.translator import AzureTranslator, get_translator
from translingo.models.translation import ErrorResponse

router = APIRouter()


@router.get("/languages", responses={500: {"model": ErrorResponse}})
async def get_languages(translator: AzureTranslator = Depends(get_translator)):
    # 原样返回 Azure 的语言列表
    return await translator.languages()

from fastapi import APIRouter, Depends
from typing import Any
from mon_ai.schemas.translation import TranslateRequest
from mon_ai.services.translator import TranslationGateway
from mon_ai.utils.translator import get_translator

router = APIRouter(prefix="/api", tags=["translations"])

@router.post("/translate")
async def translate(
    translation: TranslateRequest,
    translator: TranslationGateway = Depends(get_translator),
) -> Any:
    # Configuration and upstream failures are rendered by the app's exception handlers.
    return await translator.translate(
        translation.sentence,
        vocabulary=translation.vocabulary,
        grammar_rules=translation.grammar_rules,
    )

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict
import logging
from mon_ai.dependencies.database import get_async_session
from mon_ai.schemas.vocabulary import (
    VocabularyCreate,
    VocabularyDeleted,
    VocabularyLearned,
    VocabularyRead,
    VocabularyUpdate,
)
from mon_ai.crud.vocabulary import (
    delete_vocabulary,
    get_or_create_vocabulary,
    list_vocabulary,
    update_vocabulary,
)

router = APIRouter(prefix="/api/vocab", tags=["vocabulary"])


def _storage_error(message: str, error: Exception) -> HTTPException:
    logging.error(f"{message}: {error}")
    return HTTPException(status_code=500, detail=message)


@router.get("", response_model=Dict[str, str])
async def read_vocabulary(db: AsyncSession = Depends(get_async_session)):
    try:
        return await list_vocabulary(db)
    except SQLAlchemyError as e:
        raise _storage_error("Failed to fetch vocabulary", e)


@router.post("", response_model=VocabularyLearned, status_code=status.HTTP_201_CREATED)
async def learn_vocabulary(
    vocabulary: VocabularyCreate,
    response: Response,
    db: AsyncSession = Depends(get_async_session),
):
    """Get-or-create: 201 when the word is new, 200 with the stored translation otherwise."""
    try:
        entry, learned = await get_or_create_vocabulary(db, vocabulary.word, vocabulary.translation)
    except SQLAlchemyError as e:
        raise _storage_error("Failed to insert vocabulary", e)

    if not learned:
        response.status_code = status.HTTP_200_OK
    return VocabularyLearned(word=entry.word, translation=entry.translation, learned=learned)


@router.put("/{word}", response_model=VocabularyRead)
async def edit_vocabulary(
    word: str,
    vocabulary: VocabularyUpdate,
    db: AsyncSession = Depends(get_async_session),
):
    try:
        word, translation = await update_vocabulary(db, word, vocabulary.translation)
    except SQLAlchemyError as e:
        raise _storage_error("Failed to update vocabulary", e)
    return VocabularyRead(word=word, translation=translation)


@router.delete("/{word}", response_model=VocabularyDeleted)
async def remove_vocabulary(word: str, db: AsyncSession = Depends(get_async_session)):
    try:
        word = await delete_vocabulary(db, word)
    except SQLAlchemyError as e:
        raise _storage_error("Failed to delete vocabulary", e)
    return VocabularyDeleted(word=word)

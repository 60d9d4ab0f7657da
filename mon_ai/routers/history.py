from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging
from mon_ai.dependencies.database import get_async_session
from mon_ai.schemas.history import HistoryCreate, HistoryCreated, HistoryRead
from mon_ai.crud.history import create_history, list_history

router = APIRouter(prefix="/api/history", tags=["history"])

@router.post("", response_model=HistoryCreated, status_code=status.HTTP_201_CREATED)
async def store_history(
    history: HistoryCreate,
    db: AsyncSession = Depends(get_async_session),
):
    try:
        return await create_history(db, en=history.en, mnw=history.mnw)
    except SQLAlchemyError as e:
        logging.error(f"Failed to store history: {e}")
        raise HTTPException(status_code=500, detail="Failed to store history")

@router.get("", response_model=List[HistoryRead])
async def get_history(db: AsyncSession = Depends(get_async_session)):
    try:
        return await list_history(db)
    except SQLAlchemyError as e:
        logging.error(f"Failed to load history: {e}")
        raise HTTPException(status_code=500, detail="Failed to load history")

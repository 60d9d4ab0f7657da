from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from mon_ai.models.history import History

async def create_history(db: AsyncSession, en: str, mnw: str) -> History:
    db_history = History(en=en, mnw=mnw)
    db.add(db_history)
    await db.commit()
    await db.refresh(db_history)
    return db_history

async def list_history(db: AsyncSession) -> List[History]:
    result = await db.execute(
        select(History).order_by(desc(History.created_at), desc(History.id))
    )
    return list(result.scalars().all())

from sqlalchemy import select, update, delete
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Dict, Mapping, Optional, Tuple
from mon_ai.core.exceptions import VocabularyNotFound
from mon_ai.models.base import utcnow
from mon_ai.models.vocabulary import Vocabulary


def normalize_word(word: str) -> str:
    """Store key for a word. Every query on ``vocabulary.word`` goes through this."""
    return str(word).lower()


async def list_vocabulary(db: AsyncSession) -> Dict[str, str]:
    result = await db.execute(select(Vocabulary.word, Vocabulary.translation))
    return {word: translation for word, translation in result.all()}


async def get_vocabulary(db: AsyncSession, word: str) -> Optional[Vocabulary]:
    result = await db.execute(
        select(Vocabulary).where(Vocabulary.word == normalize_word(word))
    )
    return result.scalar_one_or_none()


async def get_or_create_vocabulary(
    db: AsyncSession, word: str, translation: str
) -> Tuple[Vocabulary, bool]:
    """Return ``(entry, learned)``.

    An existing entry is returned untouched and the supplied translation is
    ignored; ``learned`` is True only when this call inserted the row.
    """
    word = normalize_word(word)
    existing = await get_vocabulary(db, word)
    if existing is not None:
        return existing, False

    db_vocabulary = Vocabulary(word=word, translation=translation)
    db.add(db_vocabulary)
    try:
        await db.commit()
    except IntegrityError:
        # A concurrent request inserted the same word first.
        await db.rollback()
        existing = await get_vocabulary(db, word)
        if existing is None:
            raise
        return existing, False
    await db.refresh(db_vocabulary)
    return db_vocabulary, True


async def update_vocabulary(db: AsyncSession, word: str, translation: str) -> Tuple[str, str]:
    word = normalize_word(word)
    result = await db.execute(
        update(Vocabulary)
        .where(Vocabulary.word == word)
        .values(translation=translation, updated_at=utcnow())
    )
    if result.rowcount == 0:
        await db.rollback()
        raise VocabularyNotFound(word)
    await db.commit()
    return word, translation


async def delete_vocabulary(db: AsyncSession, word: str) -> str:
    word = normalize_word(word)
    result = await db.execute(delete(Vocabulary).where(Vocabulary.word == word))
    if result.rowcount == 0:
        await db.rollback()
        raise VocabularyNotFound(word)
    await db.commit()
    return word


async def seed_vocabulary(db: AsyncSession, defaults: Mapping[str, str]) -> None:
    """Insert ``defaults`` without touching words that already exist."""
    if not defaults:
        return
    now = utcnow()
    stmt = sqlite_insert(Vocabulary).values([
        {"word": normalize_word(word), "translation": translation, "created_at": now, "updated_at": now}
        for word, translation in defaults.items()
    ]).on_conflict_do_nothing(index_elements=["word"])
    await db.execute(stmt)
    await db.commit()

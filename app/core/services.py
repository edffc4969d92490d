import logging
from typing import Any

from sqlalchemy import select, func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import Board

logger = logging.getLogger(__name__)

UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class BoardStoreError(Exception):
    """Raised when the board store could not complete an operation."""


# --- Board Repository --- #


async def get_board(db: AsyncSession, project_id: str) -> dict[str, Any]:
    """Load the board document for a project.

    A project that was never saved is not an error: it reads as an empty
    board. Stored ``null`` arrays read back as empty lists as well.
    """
    try:
        result = await db.execute(
            select(Board.cards, Board.steps).where(Board.project_id == project_id)
        )
        row = result.one_or_none()
    except SQLAlchemyError as e:
        logger.error(f"Failed to read board '{project_id}': {e}", exc_info=True)
        await db.rollback()
        raise BoardStoreError(f"Failed to read board '{project_id}'") from e

    if row is None:
        return {"cards": [], "steps": []}

    return {"cards": row.cards or [], "steps": row.steps or []}


async def upsert_board(
    db: AsyncSession, project_id: str, cards: Any, steps: Any
) -> dict[str, Any]:
    """Insert or wholesale-replace the board document for a project.

    ``cards`` and ``steps`` are stored verbatim as JSON; their shape is not
    checked here. Returns the stored arrays.
    """
    try:
        insert = UPSERT_DIALECTS.get(db.get_bind().dialect.name)
        if insert is None:
            raise BoardStoreError(
                f"Unsupported database dialect: {db.get_bind().dialect.name}"
            )

        stmt = insert(Board).values(
            project_id=project_id,
            cards=cards,
            steps=steps,
            updated_at=func.now(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Board.project_id],
            set_={
                "cards": stmt.excluded.cards,
                "steps": stmt.excluded.steps,
                "updated_at": func.now(),
            },
        ).returning(Board.cards, Board.steps)

        result = await db.execute(stmt)
        row = result.one()
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Failed to save board '{project_id}': {e}", exc_info=True)
        await db.rollback()
        raise BoardStoreError(f"Failed to save board '{project_id}'") from e

    logger.info(f"Saved board '{project_id}'")
    return {"cards": row.cards, "steps": row.steps}

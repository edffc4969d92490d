import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_auth
from app.core.services import BoardStoreError, get_board, upsert_board
from app.db.session import get_db
from app.schemas.board import BoardPayload, BoardRead

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/boards",
    tags=["boards"],
    dependencies=[Depends(require_auth)],
)


@router.get("/{project_id:path}", response_model=BoardRead)
async def read_board(
    project_id: Annotated[str, Path(min_length=1)],
    db: AsyncSession = Depends(get_db),
):
    """Fetch the whole board of a project. Unknown projects read as empty."""
    try:
        return await get_board(db, project_id)
    except BoardStoreError:
        logger.error(f"Board load failed for '{project_id}'", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to load board")


@router.put("/{project_id:path}", response_model=BoardRead)
async def save_board(
    project_id: Annotated[str, Path(min_length=1)],
    board: BoardPayload,
    db: AsyncSession = Depends(get_db),
):
    """Replace both arrays of the board and echo what was stored."""
    cards = [card.to_document() for card in board.cards]
    steps = [step.to_document() for step in board.steps]

    try:
        return await upsert_board(db, project_id, cards, steps)
    except BoardStoreError:
        logger.error(f"Board save failed for '{project_id}'", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to save board")

"""
Client-side working copy of one board.

The view-model loads the board once, applies user actions to in-memory
lists and pushes the full snapshot to the server after every action.
Lists and items are never mutated in place: each action builds new ones,
so a snapshot handed to a save stays exactly what was sent.

    loading --load ok--> ready
    loading --load failed--> load-error      (terminal, remount to retry)
    loading/ready --401--> unauthorized      (session dropped, go to login)

``save_error`` is set independently while ``ready`` and does not block
further edits.
"""
import enum
import logging
import secrets
import time
from typing import Any, Callable, List, Optional, Sequence

from app.client.api import ApiError

logger = logging.getLogger(__name__)

PROJECT_COLUMNS = ("plans", "in-progress", "done")
TODO_COLUMNS = ("comfortrade", "dovi", "zavdannya-ua", "prochee")
TODO_BOARD_ID = "todo"

DEFAULT_CARD_TITLE = "Новая карточка"
DEFAULT_STEP_TITLE = "Новый шаг"
LOAD_FAILED = "Не удалось загрузить доску"
SAVE_FAILED = "Не удалось сохранить"


class BoardStatus(str, enum.Enum):
    LOADING = "loading"
    READY = "ready"
    LOAD_ERROR = "load-error"
    UNAUTHORIZED = "unauthorized"


class BoardNotReady(RuntimeError):
    pass


def new_id(prefix: str) -> str:
    """Creation time in ms plus a random suffix; unique within a board."""
    return f"{prefix}-{int(time.time() * 1000)}-{secrets.token_hex(5)}"


def array_move(items: Sequence[Any], old_index: int, new_index: int) -> List[Any]:
    moved = list(items)
    moved.insert(new_index, moved.pop(old_index))
    return moved


class BoardViewModel:
    def __init__(
        self,
        api,
        auth,
        project_id: str,
        columns: Sequence[str] = PROJECT_COLUMNS,
        with_steps: bool = True,
        on_unauthorized: Optional[Callable[[], Any]] = None,
    ):
        self.api = api
        self.auth = auth
        self.project_id = project_id
        self.columns = tuple(columns)
        self.with_steps = with_steps
        self.on_unauthorized = on_unauthorized

        self.status = BoardStatus.LOADING
        self.load_error: Optional[str] = None
        self.save_error: Optional[str] = None
        self.cards: List[dict] = []
        self.steps: List[dict] = []
        self._last_snapshot = None

    @classmethod
    def todo(cls, api, auth, **kwargs):
        """The cross-project ToDo board: free-form columns, no roadmap."""
        return cls(api, auth, TODO_BOARD_ID, columns=TODO_COLUMNS, with_steps=False, **kwargs)

    # --- Loading and saving --- #

    async def load(self):
        self.status = BoardStatus.LOADING
        self.load_error = None
        self.save_error = None

        try:
            board = await self.api.load_board(self.project_id)
        except ApiError as e:
            if e.unauthorized:
                self._session_lost()
                return
            logger.error(f"Failed to load board '{self.project_id}': {e!r}")
            self.load_error = LOAD_FAILED
            self.status = BoardStatus.LOAD_ERROR
            return
        except Exception:
            logger.error(f"Failed to load board '{self.project_id}'", exc_info=True)
            self.load_error = LOAD_FAILED
            self.status = BoardStatus.LOAD_ERROR
            return

        self.cards = list(board.get("cards") or [])
        self.steps = list(board.get("steps") or []) if self.with_steps else []
        self.status = BoardStatus.READY

    def snapshot(self):
        return self.cards, (self.steps if self.with_steps else [])

    async def _save(self) -> bool:
        self._last_snapshot = self.snapshot()
        return await self._push(*self._last_snapshot)

    async def _push(self, cards, steps) -> bool:
        try:
            await self.api.save_board(self.project_id, cards, steps)
        except ApiError as e:
            if e.unauthorized:
                self._session_lost()
                return False
            logger.warning(f"Failed to save board '{self.project_id}': {e!r}")
            self.save_error = SAVE_FAILED
            return False
        except Exception:
            logger.error(f"Failed to save board '{self.project_id}'", exc_info=True)
            self.save_error = SAVE_FAILED
            return False

        self.save_error = None
        return True

    async def retry_save(self) -> bool:
        """Re-send the last snapshot. Saves replace the whole board, so this is safe to repeat."""
        self._require_ready()
        self.save_error = None
        if self._last_snapshot is None:
            self._last_snapshot = self.snapshot()
        return await self._push(*self._last_snapshot)

    def dismiss_save_error(self):
        self.save_error = None

    def _session_lost(self):
        self.status = BoardStatus.UNAUTHORIZED
        self.auth.invalidate()
        if self.on_unauthorized is not None:
            self.on_unauthorized()

    def _require_ready(self):
        if self.status is not BoardStatus.READY:
            raise BoardNotReady(f"Board '{self.project_id}' is {self.status.value}")

    # --- Cards --- #

    def cards_in(self, column_id: str) -> List[dict]:
        return [c for c in self.cards if c.get("columnId") == column_id]

    def column_of(self, item_id: str) -> Optional[str]:
        """Column id for a drop target: a column itself or the column of a card."""
        if item_id in self.columns:
            return item_id
        for card in self.cards:
            if card.get("id") == item_id:
                return card.get("columnId")
        return None

    async def add_card(self, column_id: str, title: str = "") -> dict:
        self._require_ready()
        if column_id not in self.columns:
            raise ValueError(f"Unknown column '{column_id}'")

        card = {
            "id": new_id("card"),
            "columnId": column_id,
            "title": title.strip() or DEFAULT_CARD_TITLE,
        }
        self.cards = [*self.cards, card]
        await self._save()
        return card

    async def update_card(self, card_id: str, title: str):
        self._require_ready()
        self.cards = [
            {**c, "title": title.strip() or c.get("title")} if c.get("id") == card_id else c
            for c in self.cards
        ]
        await self._save()

    async def remove_card(self, card_id: str):
        self._require_ready()
        self.cards = [c for c in self.cards if c.get("id") != card_id]
        await self._save()

    async def move_card(self, card_id: str, over_id: Optional[str]) -> bool:
        """Drop a card on a column or on another card. Returns False for no-op drops."""
        self._require_ready()
        if over_id is None:
            return False

        card = next((c for c in self.cards if c.get("id") == card_id), None)
        if card is None:
            return False

        target = self.column_of(over_id)
        if not target or target == card.get("columnId"):
            return False

        self.cards = [
            {**c, "columnId": target} if c.get("id") == card_id else c
            for c in self.cards
        ]
        await self._save()
        return True

    # --- Roadmap steps --- #

    def numbered_steps(self) -> List[tuple]:
        return [(index + 1, step) for index, step in enumerate(self.steps)]

    def _step_index(self, step_id: str) -> int:
        return next((i for i, s in enumerate(self.steps) if s.get("id") == step_id), -1)

    async def add_step(self, title: str = "") -> dict:
        self._require_ready()
        step = {
            "id": new_id("step"),
            "title": title.strip() or DEFAULT_STEP_TITLE,
            "completed": False,
        }
        self.steps = [*self.steps, step]
        await self._save()
        return step

    async def update_step(self, step_id: str, title: str):
        self._require_ready()
        self.steps = [
            {**s, "title": title.strip() or s.get("title")} if s.get("id") == step_id else s
            for s in self.steps
        ]
        await self._save()

    async def remove_step(self, step_id: str):
        self._require_ready()
        self.steps = [s for s in self.steps if s.get("id") != step_id]
        await self._save()

    async def toggle_step(self, step_id: str):
        self._require_ready()
        self.steps = [
            {**s, "completed": not s.get("completed")} if s.get("id") == step_id else s
            for s in self.steps
        ]
        await self._save()

    async def move_step(self, active_id: str, over_id: Optional[str]) -> bool:
        """Sortable drop of one step onto another's position."""
        self._require_ready()
        if over_id is None or active_id == over_id:
            return False

        old_index = self._step_index(active_id)
        new_index = self._step_index(over_id)
        if old_index == -1 or new_index == -1 or old_index == new_index:
            return False

        self.steps = array_move(self.steps, old_index, new_index)
        await self._save()
        return True

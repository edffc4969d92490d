"""In-memory stand-in for BoardApiClient with scriptable failures."""
import copy

from app.client.api import ApiError


class FakeBoardApi:
    def __init__(self, boards=None):
        self.boards = boards or {}
        self.saves = []
        self.calls = []
        self.session = False
        self.fail_load = None
        self.fail_save = []
        self.fail_logout = None
        self.credentials = ("admin", "s3cret")

    async def load_board(self, project_id):
        self.calls.append(("load_board", project_id))
        if self.fail_load is not None:
            raise self.fail_load
        board = self.boards.get(project_id, {"cards": [], "steps": []})
        return copy.deepcopy(board)

    async def save_board(self, project_id, cards, steps):
        self.calls.append(("save_board", project_id))
        self.saves.append((project_id, cards, steps))
        if self.fail_save:
            raise self.fail_save.pop(0)
        self.boards[project_id] = {"cards": copy.deepcopy(cards), "steps": copy.deepcopy(steps)}

    async def login(self, login, password):
        self.calls.append(("login", login))
        if (login, password) != self.credentials:
            raise ApiError('{"error":"Неверный логин или пароль"}', 401)
        self.session = True

    async def logout(self):
        self.calls.append(("logout",))
        if self.fail_logout is not None:
            raise self.fail_logout
        self.session = False

    async def check_session(self):
        self.calls.append(("check_session",))
        return self.session

from app.db.models.board import Board

__all__ = ["Board"]

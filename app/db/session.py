from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import NullPool

from app.core import config

engine_options = {"echo": False, "future": True}
if config.DATABASE_URL.startswith("sqlite"):
    # aiosqlite connections are bound to their own thread; don't keep them around
    engine_options["poolclass"] = NullPool

engine = create_async_engine(config.DATABASE_URL, **engine_options)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

async def get_db():
    async with async_session() as session:
        yield session

from sqlmodel import create_engine, SQLModel
from .settings import settings


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    connect_args={"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {},
)


def create_db_and_tables(bind=None):
    # model modules must be imported so their tables are registered on the metadata
    import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)

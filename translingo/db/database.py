import os
import sqlite3
from contextlib import contextmanager

DEFAULT_DB_PATH = os.path.join(
    os.path.expanduser("~"), ".translingo", "storage.db"
)


def get_db_path() -> str:
    return os.getenv("TRANSLINGO_STORAGE", DEFAULT_DB_PATH)


def init_db(path: str):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with get_db(path) as conn:
        c = conn.cursor()
        c.execute("""
            CREATE TABLE IF NOT EXISTS storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        conn.commit()


@contextmanager
def get_db(path: str = None):
    conn = sqlite3.connect(path or get_db_path())
    try:
        yield conn
    finally:
        conn.close()

from typing import Optional

from translingo.db.database import get_db, get_db_path, init_db


class LocalStorage:
    """Keyed string store, one value per key, like a browser's localStorage."""

    def __init__(self, path: Optional[str] = None):
        self.path = path or get_db_path()
        init_db(self.path)

    def get_item(self, key: str) -> Optional[str]:
        with get_db(self.path) as conn:
            c = conn.cursor()
            c.execute("SELECT value FROM storage WHERE key = ?", (key,))
            row = c.fetchone()
        return row[0] if row else None

    def set_item(self, key: str, value: str):
        with get_db(self.path) as conn:
            c = conn.cursor()
            c.execute("""
                INSERT INTO storage (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """, (key, value))
            conn.commit()

    def remove_item(self, key: str):
        with get_db(self.path) as conn:
            c = conn.cursor()
            c.execute("DELETE FROM storage WHERE key = ?", (key,))
            conn.commit()

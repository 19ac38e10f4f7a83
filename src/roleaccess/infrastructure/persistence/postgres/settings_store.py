"""PostgreSQL settings store implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from roleaccess.domain.entities import UIHideSetting


class PostgresSettingsStore:
    """Keeps the UI hide setting as one JSONB document in app_option."""

    def __init__(self, conn: AsyncConnection, option_name: str) -> None:
        self._conn = conn
        self._option_name = option_name

    async def get_ui_hide_settings(self) -> UIHideSetting:
        """Load hide setting; empty when never saved."""
        cur = await self._conn.execute(
            "SELECT value FROM app_option WHERE name = %s",
            (self._option_name,),
        )
        r = await cur.fetchone()
        if not r:
            return UIHideSetting()
        return UIHideSetting.from_document(r[0])

    async def set_ui_hide_settings(self, setting: UIHideSetting) -> None:
        """Replace stored hide setting."""
        await self._conn.execute(
            "INSERT INTO app_option (name, value) VALUES (%s, %s) "
            "ON CONFLICT (name) DO UPDATE SET value = EXCLUDED.value",
            (self._option_name, Jsonb(setting.to_document())),
        )

"""Settings store port - persisted UI hide setting."""

from typing import Protocol

from roleaccess.domain.entities import UIHideSetting


class SettingsStore(Protocol):
    """Port for the UI hide setting document."""

    async def get_ui_hide_settings(self) -> UIHideSetting: ...

    async def set_ui_hide_settings(self, setting: UIHideSetting) -> None: ...

from .settings_repository import (
    SettingsSaveError,
    export_settings_from_mapping,
    export_settings_to_mapping,
    load_export_settings,
    save_export_settings,
)

__all__ = [
    "SettingsSaveError",
    "export_settings_from_mapping",
    "export_settings_to_mapping",
    "load_export_settings",
    "save_export_settings",
]

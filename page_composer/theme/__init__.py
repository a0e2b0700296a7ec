from .settings_schema import ThemeSettingsSchema

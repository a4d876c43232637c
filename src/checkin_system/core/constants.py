"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

RECORDS_KEY = "checkin_records_v1"
CONFIG_KEY = "checkin_config_v1"

SYSTEM_ACTOR = "system"
PROFESSOR_ACTOR = "professor"

CLIENT_ORIGIN_PLACEHOLDER = "127.0.0.1 (simulado)"

DATE_KEY_FORMAT = "%Y-%m-%d"
TIME_LABEL_FORMAT = "%H:%M"
DISPLAY_DATE_FORMAT = "%d/%m/%Y"

EXPORT_HEADER = ("Data", "Hora", "Nome Completo", "Matricula", "Status", "IP", "Dispositivo")
EXPORT_FILENAME_PREFIX = "presencas_export"

DEFAULT_YEAR_OPTIONS = 5

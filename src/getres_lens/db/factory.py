from getres_lens.config import SOURCE_KINDS, Settings
from getres_lens.core.ports.source import ResourceSource
from getres_lens.errors import ConfigError


def create_source(settings: Settings) -> ResourceSource:
    if settings.source == "sql":
        from getres_lens.db.engine import get_engine
        from getres_lens.db.sql import SqlResourceSource

        return SqlResourceSource(get_engine(settings.database_url), settings.table)
    if settings.source == "json":
        if not settings.json_path:
            raise ConfigError("The json source needs GETRES_JSON_PATH or --json-path.")
        from getres_lens.db.json_file import JsonFileResourceSource

        return JsonFileResourceSource(settings.json_path)
    if settings.source == "memory":
        from getres_lens.db.memory import InMemoryResourceSource

        return InMemoryResourceSource()
    raise ConfigError(f"Unknown resource source '{settings.source}'. Expected one of: {', '.join(SOURCE_KINDS)}")

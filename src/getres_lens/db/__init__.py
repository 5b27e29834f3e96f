from getres_lens.db.factory import create_source
from getres_lens.db.json_file import JsonFileResourceSource
from getres_lens.db.memory import InMemoryResourceSource
from getres_lens.db.sql import SqlResourceSource

__all__ = [
    "InMemoryResourceSource",
    "JsonFileResourceSource",
    "SqlResourceSource",
    "create_source",
]

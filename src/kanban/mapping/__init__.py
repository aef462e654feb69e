# Pure conversions, one module per entity:
#   wire request -> command input -> record, record -> command output -> wire response
from . import accountable, project, secretariat
from .common import as_utc, replace_record, utcnow

__all__ = [
    "accountable",
    "project",
    "secretariat",
    "as_utc",
    "replace_record",
    "utcnow",
]

"""Data loading, normalization, and the in-memory record store."""
from .loader import load_users
from .store import UserStore, load_store
from .schemas import UserRecord, ColumnIndex
from .normalize import resolve_columns, split_fields, parse_age, parse_ages

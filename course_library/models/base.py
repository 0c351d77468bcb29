from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def ordinal_string(length: int) -> String:
    """VARCHAR compared byte-wise; PostgreSQL gets the "C" collation."""
    return String(length).with_variant(String(length, collation="C"), "postgresql")

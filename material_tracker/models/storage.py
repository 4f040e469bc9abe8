from sqlmodel import SQLModel, Field


class StoreEntry(SQLModel, table=True):
    """
    Key-value row backing the persistence bridge.
    The whole request collection lives under one key as a JSON string.
    """
    key: str = Field(primary_key=True)
    value: str

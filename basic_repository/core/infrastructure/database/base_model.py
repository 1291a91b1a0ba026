"""Base SQLModel for repository-managed tables."""

from sqlmodel import Field, SQLModel


class BaseModel(SQLModel):
    """Base model with an auto-increment primary key.

    Subclasses declare ``table=True``. The id stays None until the first
    flush assigns it, which is what ``is_new`` reports.
    """

    id: int | None = Field(default=None, primary_key=True)

    def is_new(self) -> bool:
        return self.id is None

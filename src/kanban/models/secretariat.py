from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ..database.base import Base, EntityMixin


class Secretariat(EntityMixin, Base):
    """
    Organizational unit. Accountables and projects may point at one.
    """

    __tablename__ = "secretariat"

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Secretariat(id={self.id!r}, uuid={self.uuid!r}, name={self.name!r})>"

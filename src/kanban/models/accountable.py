from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, func, select
from sqlalchemy.orm import Mapped, column_property, mapped_column

from ..database.base import Base, EntityMixin
from .secretariat import Secretariat


class Accountable(EntityMixin, Base):
    """
    Person responsible for projects.

    Email uniqueness is case-insensitive: the functional index on lower(email)
    is what actually guarantees it, whatever the caller checked beforehand.
    """

    __tablename__ = "accountable"

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    email: Mapped[str] = mapped_column(String(150), nullable=False)

    role: Mapped[str] = mapped_column(String(50), nullable=False)

    # Restrict on delete: a secretariat still in use cannot be removed.
    secretariat_id: Mapped[int | None] = mapped_column(
        ForeignKey("secretariat.id"),
        nullable=True,
        index=True,
    )

    # Business uuid of the referenced secretariat, read with the row.
    secretariat_uuid: Mapped[UUID | None] = column_property(
        select(Secretariat.uuid)
        .where(Secretariat.id == secretariat_id)
        .correlate_except(Secretariat)
        .scalar_subquery()
    )

    __table_args__ = (
        Index("uq_accountable_email_lower", func.lower(email), unique=True),
    )

    def __repr__(self) -> str:
        return f"<Accountable(id={self.id!r}, uuid={self.uuid!r}, email={self.email!r})>"

import enum
from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, Integer, String, select
from sqlalchemy.orm import Mapped, column_property, mapped_column

from ..database.base import Base, EntityMixin
from .secretariat import Secretariat


class ProjectStatus(str, enum.Enum):
    """
    Status labels a project moves through. Any label may follow any other.
    """

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Project(EntityMixin, Base):
    """
    Work item with a lifecycle status and planned/actual scheduling fields.
    """

    __tablename__ = "project"

    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Stored as free text; ProjectStatus names the values the API hands out.
    status: Mapped[str] = mapped_column(String(50), nullable=False)

    expected_start: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    expected_end: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    start_actual: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    end_actual: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    days_late: Mapped[int | None] = mapped_column(Integer, nullable=True)

    percentage_of_time_remaining: Mapped[float | None] = mapped_column(Float, nullable=True)

    secretariat_id: Mapped[int | None] = mapped_column(
        ForeignKey("secretariat.id"),
        nullable=True,
        index=True,
    )

    secretariat_uuid: Mapped[UUID | None] = column_property(
        select(Secretariat.uuid)
        .where(Secretariat.id == secretariat_id)
        .correlate_except(Secretariat)
        .scalar_subquery()
    )

    __table_args__ = (
        CheckConstraint("days_late >= 0", name="days_late_non_negative"),
        CheckConstraint(
            "percentage_of_time_remaining >= 0",
            name="percentage_non_negative",
        ),
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id!r}, uuid={self.uuid!r}, name={self.name!r}, status={self.status!r})>"

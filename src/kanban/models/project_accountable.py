from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ..database.base import Base


class ProjectAccountable(Base):
    """
    Association row linking a project to one of its accountables.
    Rows disappear with either side.
    """

    __tablename__ = "project_accountables"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    project_id: Mapped[int] = mapped_column(
        ForeignKey("project.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    accountable_id: Mapped[int] = mapped_column(
        ForeignKey("accountable.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("project_id", "accountable_id", name="project_accountable_pair"),
    )

    def __repr__(self) -> str:
        return f"<ProjectAccountable(project_id={self.project_id!r}, accountable_id={self.accountable_id!r})>"

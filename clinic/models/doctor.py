from sqlmodel import Field, SQLModel


class DoctorBase(SQLModel):
    name: str
    email: str = Field(unique=True, index=True)
    specialization: str | None = None
    department: str | None = None
    is_active: bool = True


class Doctor(DoctorBase, table=True):
    __tablename__ = "doctors"
    id: int | None = Field(default=None, primary_key=True)


class DoctorSummary(SQLModel):
    """Entry of the calendar's doctor filter."""

    id: int
    name: str
    specialization: str | None = None

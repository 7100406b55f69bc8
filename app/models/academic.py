from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.schema import UniqueConstraint
from app.models.base import Base, BaseModel

# Class Model
class Class(BaseModel):
    __tablename__ = "classes"

    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="", server_default="")

    professor_id = Column(Integer, ForeignKey("professors.id", ondelete="RESTRICT"), nullable=False)

    # Relationships
    professor = relationship("Professor", back_populates="classes")
    enrollments = relationship("ClassEnrollment", back_populates="enrollment_class",
        passive_deletes=True)
    enrolled_academics = relationship("Academic", secondary="class_academics",
        back_populates="classes", viewonly=True)

# Junction between classes and academics, one row per (class, academic) pair
class ClassEnrollment(Base):
    __tablename__ = "class_academics"

    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), primary_key=True)
    academic_id = Column(Integer, ForeignKey("academics.id", ondelete="CASCADE"), primary_key=True)

    __table_args__ = (
        UniqueConstraint("class_id", "academic_id", name="uq_class_academic_enrollment"),
    )

    # Relationships
    enrollment_class = relationship("Class", back_populates="enrollments")

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from app.models.base import BaseModel
import enum

class UserRole(enum.Enum):
    PROFESSOR = "professor"
    ACADEMIC = "academic"

class User(BaseModel):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    # Placeholder: stored as given, no hashing
    plaintext_password = Column(String(255), nullable=False)

    # Variant tag, fixed at creation
    user_type = Column(Enum(UserRole, values_callable=lambda obj: [e.value for e in obj],
        native_enum=False, name="user_type"), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": user_type,
    }

    @property
    def role(self) -> UserRole:
        return self.user_type

class Professor(User):
    __tablename__ = "professors"

    id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    department = Column(String(255), nullable=False)

    classes = relationship("Class", back_populates="professor")

    __mapper_args__ = {
        "polymorphic_identity": UserRole.PROFESSOR,
    }

class Academic(User):
    __tablename__ = "academics"

    id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    registration_number = Column(String(50), nullable=False)

    # Edges are written through ClassEnrollment, never through this collection
    classes = relationship("Class", secondary="class_academics",
        back_populates="enrolled_academics", viewonly=True)

    __mapper_args__ = {
        "polymorphic_identity": UserRole.ACADEMIC,
    }

from .user import User, UserRole, Professor, Academic
from .academic import Class, ClassEnrollment

# /tutorhub/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to create and read operations.
    """
    name: str = Field(..., min_length=2, description="The full name of the student.")
    email: str = Field(..., min_length=3, description="Contact email for the student.")
    phone: Optional[str] = Field(default=None)
    class_label: str = Field(..., min_length=1, description="The class or grade the student is enrolled in, e.g. '10th'.")
    subjects: List[str] = Field(default_factory=list, description="Subjects the student is enrolled in.")
    parent_id: Optional[str] = Field(default=None, description="Profile ID of the linked parent, if any.")
    profile_id: Optional[str] = Field(default=None, description="Profile ID the student signs in with, if any.")

class StudentCreate(StudentBase):
    """The model used for creating a new student. Inherits all fields from the base."""
    pass

class StudentUpdate(BaseModel):
    """
    The model for updating a student. All fields are optional to allow for
    partial updates.
    """
    model_config = ConfigDict(from_attributes=True)

    name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[str] = Field(default=None, min_length=3)
    phone: Optional[str] = Field(default=None)
    class_label: Optional[str] = Field(default=None, min_length=1)
    subjects: Optional[List[str]] = Field(default=None)
    parent_id: Optional[str] = Field(default=None)

class Student(StudentBase):
    """
    The full representation of a Student resource, as it is stored in the
    database and returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, server-generated identifier for the student.")

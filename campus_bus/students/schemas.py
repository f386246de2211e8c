from pydantic import BaseModel, EmailStr
from typing import Optional

class StudentBase(BaseModel):
    college_id: str
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None

class StudentCreate(StudentBase):
    pass

class Student(StudentBase):
    id: str
    
    class Config:
        from_attributes = True

# Passwordless authentication by college ID
class StudentAuthRequest(BaseModel):
    college_id: str

class StudentAuthResponse(BaseModel):
    success: bool = True
    student: Student

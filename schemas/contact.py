from pydantic import BaseModel, EmailStr, Field
from typing import List

class ContactMessageCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="Sender name")
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200, description="Message subject")
    message: str = Field(..., min_length=1, max_length=5000, description="Message body (1–5000 characters)")

    class Config:
        # whitespace-only values fail min_length after stripping
        str_strip_whitespace = True

class FieldError(BaseModel):
    field: str
    reason: str

class ContactSuccessResponse(BaseModel):
    success: bool = True
    message: str
    id: int

class ErrorResponse(BaseModel):
    success: bool = False
    message: str

class ValidationErrorResponse(ErrorResponse):
    errors: List[FieldError]

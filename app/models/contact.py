from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Dict, List, Optional

class ContactForm(BaseModel):
    """Inbound contact form body. Every field may be missing at this point."""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None

    @field_validator("name", "email", "message", mode="before")
    @classmethod
    def required_scalar_to_str(cls, value):
        # Falsy scalars (0, false) count as missing, the rest are stored as text
        if isinstance(value, (bool, int, float)):
            return scalar_to_str(value) if value else None
        return value

    @field_validator("phone", mode="before")
    @classmethod
    def phone_to_str(cls, value):
        if isinstance(value, (bool, int, float)):
            return scalar_to_str(value)
        return value

def scalar_to_str(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

class ContactSubmission(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    message: str

    def to_document(self) -> Dict[str, Any]:
        """Fields exactly as they are stored; a missing phone is left out"""
        document = {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "message": self.message,
        }
        if self.phone is None:
            del document["phone"]
        return document

class ContactResponse(BaseModel):
    success: bool = True
    message: str

class ContactErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None
    errors: Optional[List[Dict[str, Any]]] = None

class PingResponse(BaseModel):
    success: bool = True
    message: str
    mongo: str
    email: str

from typing import Optional

from pydantic import BaseModel

from dairy_admin.schemas.common import id_field


class SystemConfig(BaseModel):
    morningTime: Optional[str] = None
    eveningTime: Optional[str] = None


class Milkman(BaseModel):
    id: Optional[str] = id_field()
    name: str = ""
    phoneNumber: Optional[str] = None
    isActive: bool = True


class MilkmanCreate(BaseModel):
    name: str
    phoneNumber: str


class Admin(BaseModel):
    id: Optional[str] = id_field()
    username: str = ""
    isAdmin: bool = True


class AdminCreate(BaseModel):
    username: str
    password: Optional[str] = None
    isAdmin: bool = True

"""Support directory models.

Contacts are a tagged union discriminated by ``type``.
"""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class _Contact(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    available: str


class CrisisContactOut(_Contact):
    type: Literal["crisis"] = "crisis"
    number: str


class TherapistContactOut(_Contact):
    type: Literal["therapist"] = "therapist"
    specialization: str
    contact: str


class GroupContactOut(_Contact):
    type: Literal["group"] = "group"
    description: str
    contact: str


class OnlineResourceOut(_Contact):
    type: Literal["online"] = "online"
    description: str
    contact: str


ContactOut = Annotated[
    Union[CrisisContactOut, TherapistContactOut, GroupContactOut, OnlineResourceOut],
    Field(discriminator="type"),
]


class SupportCategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    contacts: list[ContactOut]


class ContactRequestIn(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    message: str = Field(min_length=1)
    urgency: Literal["low", "medium", "high"] = "low"


class ContactRequestAck(BaseModel):
    id: str
    message: str

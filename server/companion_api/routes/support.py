"""Support circle API routes."""
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from wellness_companion.support import (
    SELF_CARE_TIPS,
    SUPPORT_RESOURCES,
    ContactRequest,
    get_category,
    submit_contact_request,
)

from ..models.support import ContactRequestAck, ContactRequestIn, SupportCategoryOut

router = APIRouter(prefix="/api/support", tags=["Support"])


@router.get("/resources", response_model=list[SupportCategoryOut])
async def get_support_resources():
    return [SupportCategoryOut.model_validate(asdict(c)) for c in SUPPORT_RESOURCES]


@router.get("/resources/{category_id}", response_model=SupportCategoryOut)
async def get_support_category(category_id: str):
    category = get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail=f"Unknown support category: {category_id}")
    return SupportCategoryOut.model_validate(asdict(category))


@router.get("/tips", response_model=list[str])
async def get_self_care_tips():
    return SELF_CARE_TIPS


@router.post("/contact", response_model=ContactRequestAck)
async def submit_contact(body: ContactRequestIn):
    request = ContactRequest(
        name=body.name,
        email=str(body.email),
        message=body.message,
        urgency=body.urgency,
    )
    message = submit_contact_request(request)
    return ContactRequestAck(id=request.id, message=message)

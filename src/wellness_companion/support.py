"""Support resources: crisis lines, professionals, peer groups and online communities."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional, Union

logger = logging.getLogger(__name__)

Urgency = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class CrisisContact:
    name: str
    number: str
    available: str
    type: Literal["crisis"] = "crisis"


@dataclass(frozen=True)
class TherapistContact:
    name: str
    specialization: str
    contact: str
    available: str
    type: Literal["therapist"] = "therapist"


@dataclass(frozen=True)
class GroupContact:
    name: str
    description: str
    contact: str
    available: str
    type: Literal["group"] = "group"


@dataclass(frozen=True)
class OnlineResource:
    name: str
    description: str
    contact: str
    available: str
    type: Literal["online"] = "online"


Contact = Union[CrisisContact, TherapistContact, GroupContact, OnlineResource]


@dataclass(frozen=True)
class SupportCategory:
    id: str
    title: str
    description: str
    contacts: List[Contact]


SUPPORT_RESOURCES = [
    SupportCategory(
        id="crisis",
        title="Crisis Support",
        description="24/7 immediate help when you need it most",
        contacts=[
            CrisisContact("National Crisis Helpline", "9152987821", "24/7"),
            CrisisContact("NIMHANS Emergency", "080-26995000", "24/7"),
            CrisisContact("iCall Helpline", "9152987821", "Mon-Sat 8AM-10PM"),
        ],
    ),
    SupportCategory(
        id="professional",
        title="Professional Support",
        description="Connect with mental health professionals",
        contacts=[
            TherapistContact("Dr. Priya Sharma", "Anxiety & Depression", "priya.sharma@therapy.com", "Mon-Fri 9AM-6PM"),
            TherapistContact("Dr. Rajesh Kumar", "Trauma & PTSD", "rajesh.kumar@wellness.com", "Tue-Sat 10AM-7PM"),
            TherapistContact("Dr. Ananya Singh", "Youth Mental Health", "ananya.singh@youthcare.com", "Mon-Thu 2PM-8PM"),
        ],
    ),
    SupportCategory(
        id="peer",
        title="Peer Support",
        description="Connect with others who understand your journey",
        contacts=[
            GroupContact("Student Support Group", "Weekly meetings for college students", "students@dilseai.com", "Sundays 4PM-6PM"),
            GroupContact("Anxiety Support Circle", "Safe space to share experiences", "anxiety.support@dilseai.com", "Wednesdays 7PM-8PM"),
            GroupContact("Mindfulness Community", "Meditation and mindfulness practice", "mindfulness@dilseai.com", "Daily 6AM-7AM"),
        ],
    ),
    SupportCategory(
        id="online",
        title="Online Resources",
        description="Digital tools and communities",
        contacts=[
            OnlineResource("DilSe AI Community Forum", "Anonymous discussion board", "community.dilseai.com", "24/7"),
            OnlineResource("Mental Health India", "Comprehensive resource directory", "mentalhealthindia.org", "24/7"),
            OnlineResource("Headspace India", "Meditation and mindfulness app", "headspace.com/in", "24/7"),
        ],
    ),
]

SELF_CARE_TIPS = [
    "Practice deep breathing for 5 minutes when feeling overwhelmed",
    "Write down three things you're grateful for each day",
    "Take a 10-minute walk outside to clear your mind",
    "Listen to calming music or nature sounds",
    "Practice progressive muscle relaxation before bed",
    "Connect with a friend or family member you trust",
    "Engage in a creative activity like drawing or writing",
    "Limit social media and news consumption if it's causing stress",
]

CONTACT_ACKNOWLEDGEMENT = (
    "Your message has been sent. Someone from our support team will get back "
    "to you within 24 hours."
)


def get_category(category_id: str) -> Optional[SupportCategory]:
    for category in SUPPORT_RESOURCES:
        if category.id == category_id:
            return category
    return None


@dataclass
class ContactRequest:
    """A message for the support team."""

    name: str
    email: str
    message: str
    urgency: Urgency = "low"
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def submit_contact_request(request: ContactRequest) -> str:
    """Log a contact request and return the acknowledgement shown to the user."""
    log = logger.warning if request.urgency == "high" else logger.info
    log(f"[SUPPORT] Contact request {request.id} ({request.urgency}) from {request.email}")
    return CONTACT_ACKNOWLEDGEMENT

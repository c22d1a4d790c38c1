"""Tagged priority table for intent classification.

Each entry is ``(tier, pattern, intent)``. Tiers are evaluated in ascending
order and the first matching pattern wins, regardless of how specific a
later pattern is. New patterns must be added to the tier that owns them;
tiers are never reordered.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from content_ranker.models.domain import Intent


class IntentPattern(NamedTuple):
    tier: int
    pattern: re.Pattern
    intent: Intent


COURSE_CLARIFICATION_PATTERNS = (
    r"what courses do you offer",
)

# Booking, policy and logistics questions that mention a workshop or course
# but must not be routed to the event listings.
CONTACT_POLICY_PATTERNS = (
    r"cancellation or refund policy for courses",
    r"cancellation or refund policy for workshops",
    r"how do i book a course or workshop",
    r"can the gift voucher be used for any workshop",
    r"can the gift voucher be used for any course",
    r"how do i know which course or workshop is best",
    r"do you do astrophotography workshops",
    r"do you get a certificate with the photography course",
    r"do i get a certificate with the photography course",
    r"do you i get a certificate with the photography course",
    r"can my.*attend your workshop",
    r"can.*year old attend your workshop",
    r"how do i subscribe to the free online photography course",
    r"how many students per workshop",
    r"how many students per class",
    r"what gear or equipment do i need to bring to a workshop",
    r"what equipment do i need to bring to a workshop",
    r"how early should i arrive before a class",
    r"how early should i arrive before a workshop",
)

WORKSHOP_EVENT_PATTERNS = (
    r"photography workshop",
    r"workshop",
    r"photography training",
    r"photography course",
    r"camera courses?",
    r"weekend.*workshop",
    r"group.*workshop",
    r"advanced.*workshop",
    r"equipment.*provided",
    r"photoshop.*course",
)

DIRECT_ANSWER_PATTERNS = (
    # about the business
    r"who is alan ranger",
    r"tell me about alan ranger",
    r"alan ranger background",
    r"alan ranger experience",
    r"how long has alan ranger",
    r"alan ranger qualifications",
    r"how long have you been",
    r"professional experience",
    r"where is alan ranger based",
    r"alan ranger photographic background",
    # business policies
    r"terms an[cd] conditions",
    r"where.*terms.*conditions",
    r"cancellation policy",
    r"refund policy",
    r"booking policy",
    r"privacy policy",
    r"gift voucher",
    r"gift certificate",
    r"cancellation or refund policy",
    # contact and booking
    r"how can i contact you",
    r"book a discovery call",
    r"contact information",
    r"phone number",
    r"email address",
    r"how do i book",
    r"booking process",
    # services
    r"do you do commercial photography",
    r"commercial photography services",
    r"wedding photography services",
    r"portrait photography services",
    r"event photography services",
    r"property photography",
    r"real estate photography",
    r"product photography",
    r"e-commerce store",
    r"pricing structure for portrait",
    r"headshot work",
    r"corporate photography",
    r"retouching services",
    r"editing services",
    r"fine art prints",
    r"turnaround time",
    r"usage rights",
    r"licensing for photos",
    r"commission you for",
    r"commercial photography project",
    r"how far will you travel",
    # specific information
    r"customer reviews",
    r"testimonials",
    r"where can i read reviews",
    r"what equipment do i need",
    r"what gear do i need",
    r"equipment needed",
    r"what sort of camera do i need",
    r"do i need a laptop",
    r"certificate with the photography course",
    # free course
    r"free online photography",
    r"free photography course",
    r"free photography academy",
    r"free online academy",
    r"online photography course really free",
    r"subscribe to the free online",
    # technical questions
    r"explain the exposure triangle",
    r"what is the exposure triangle",
    r"camera settings for low light",
    r"best camera settings",
    r"tripod recommendation",
    r"what tripod do you recommend",
    r"best tripod for",
    r"what is long exposure",
    r"long exposure and how can i find out more",
    r"pictures never seem sharp",
    r"advise on what i am doing wrong",
    r"personalised feedback on my images",
    r"get personalised feedback",
    # core concepts
    r"how to use aperture",
    r"what is aperture",
    r"aperture explained",
    r"aperture guide",
    r"how to use iso",
    r"what is iso",
    r"iso explained",
    r"iso guide",
    r"how to use shutter",
    r"what is shutter",
    r"shutter speed explained",
    r"shutter speed guide",
    r"what is depth of field",
    r"depth of field explained",
    r"what is white balance",
    r"what is metering",
    r"what is focal length",
    r"composition tips",
    r"composition guide",
    r"photography composition",
    r"exposure triangle",
    r"camera basics",
    r"photography basics",
    r"beginner photography",
    r"photography tips",
    r"how to improve photography",
    r"photography advice",
    # equipment recommendations
    r"best camera for beginners",
    r"what camera should i buy",
    r"camera recommendation",
    r"what lens should i buy",
    r"lens recommendation",
    r"camera bag recommendation",
    # courses and classes
    r"complete beginners",
    r"evening classes in coventry",
    r"how many weeks is the beginners",
    r"get off auto class",
    r"standalone",
    r"topics are covered in the 5-week",
    r"miss one of the weekly classes",
    r"make it up",
    r"online or zoom lessons",
    r"mentoring",
    r"1-2-1 private lessons cost",
    r"private lessons cost",
    r"residential workshops",
    r"multi-day field trips",
    r"students per class",
    r"post-processing courses",
    r"prerequisites for advanced courses",
    # locations and venues
    r"where are you located",
    r"studio location",
    r"meeting point",
    r"parking",
    r"public transport",
    r"where is your gallery",
    r"submit my images for feedback",
    # age and accessibility
    r"can my.*yr old attend",
    r"age.*attend",
    r"young.*attend",
    # professional
    r"ethical guidelines",
    r"photography tutor",
    # payment plans
    r"what is pick n mix",
    r"pick n mix in the payment plans",
)

BROAD_CLARIFICATION_PATTERNS = (
    r"photography services",
    r"photography articles",
    r"photography help",
    r"photography equipment",
    r"photography gear",
    r"photography techniques",
    r"photography tutorials",
    r"what courses",
    r"do you offer courses",
    r"do you do courses",
)

_TIERS = (
    (1, COURSE_CLARIFICATION_PATTERNS, Intent.COURSE_CLARIFICATION),
    (2, CONTACT_POLICY_PATTERNS, Intent.CONTACT_POLICY),
    (3, WORKSHOP_EVENT_PATTERNS, Intent.WORKSHOP_EVENT),
    (4, DIRECT_ANSWER_PATTERNS, Intent.DIRECT_ANSWER),
    (5, BROAD_CLARIFICATION_PATTERNS, Intent.BROAD_CLARIFICATION),
)


def build_intent_table() -> tuple[IntentPattern, ...]:
    table = [
        IntentPattern(tier, re.compile(pattern, re.IGNORECASE), intent)
        for tier, patterns, intent in _TIERS
        for pattern in patterns
    ]
    return tuple(sorted(table, key=lambda p: p.tier))


INTENT_TABLE = build_intent_table()

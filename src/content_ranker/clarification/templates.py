"""Clarification prompt templates keyed by coarse topic.

Templates are evaluated top to bottom; the first whose ``requires`` words all
occur in the lowercased query is used. ``GENERAL_TEMPLATE`` covers anything
else so a prompt can always be produced.
"""

from __future__ import annotations

from dataclasses import dataclass

from content_ranker.models.domain import ClarificationOption, ClarificationState, Intent

EVENTS = Intent.WORKSHOP_EVENT
ADVICE = Intent.DIRECT_ANSWER


@dataclass(frozen=True)
class ClarificationTemplate:
    type: str
    requires: tuple[str, ...]
    question: str
    options: tuple[tuple[str, str, Intent], ...]

    def matches(self, text: str) -> bool:
        return all(word in text for word in self.requires)

    def build(self) -> ClarificationState:
        return ClarificationState(
            type=self.type,
            question=self.question,
            options=tuple(
                ClarificationOption(label=label, mapped_query=query, mapped_intent=intent)
                for label, query, intent in self.options
            ),
        )


TEMPLATES: tuple[ClarificationTemplate, ...] = (
    ClarificationTemplate(
        type="equipment_clarification",
        requires=("equipment",),
        question=(
            "What type of photography activity are you planning? "
            "This will help me recommend the right equipment."
        ),
        options=(
            ("Photography course/workshop", "equipment for photography course", EVENTS),
            ("General photography advice", "photography equipment advice", ADVICE),
            ("Specific camera/lens advice", "camera lens recommendations", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="events_clarification",
        requires=("events",),
        question="What type of photography events are you interested in?",
        options=(
            ("Photography courses", "photography courses", EVENTS),
            ("Photography workshops", "photography workshops", EVENTS),
            ("Photography exhibitions", "photography exhibitions", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="training_clarification",
        requires=("training",),
        question="What type of photography training are you looking for?",
        options=(
            ("Photography courses", "photography courses", EVENTS),
            ("Photography workshops", "photography workshops", EVENTS),
            ("Photography mentoring", "photography mentoring", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="free_course_clarification",
        requires=("free", "course"),
        question=(
            "Yes! We have a free online photography course. "
            "Would you like to know more about it?"
        ),
        options=(
            ("Course details and content", "free course details", ADVICE),
            ("How to join", "how to join free course", ADVICE),
            ("What's included", "free course content", ADVICE),
            ("Is it really free", "free course confirmation", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="location_clarification",
        requires=("birmingham",),
        question=(
            "We run courses in various locations. "
            "What type of photography course are you looking for?"
        ),
        options=(
            ("Courses near Birmingham", "photography courses near Birmingham", ADVICE),
            ("Online courses instead", "online photography courses", ADVICE),
            ("Travel to Coventry", "photography courses Coventry", EVENTS),
            ("Private lessons", "private photography lessons", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="format_comparison_clarification",
        requires=("difference", "online"),
        question=(
            "Great question! We offer both formats with different benefits. "
            "What would you like to know about each?"
        ),
        options=(
            ("Key differences", "online vs in-person course differences", ADVICE),
            ("Online course benefits", "online course benefits", ADVICE),
            ("In-person course benefits", "in-person course benefits", ADVICE),
            ("Which is right for me", "course format recommendation", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="beginner_suitability_clarification",
        requires=("suitable", "beginners"),
        question=(
            "Absolutely! We have courses designed specifically for beginners. "
            "What type of photography interests you most?"
        ),
        options=(
            ("General beginner courses", "beginner photography courses", ADVICE),
            ("Beginner editing course", "beginner editing course", EVENTS),
            ("Camera basics", "camera basics course", ADVICE),
            ("Composition fundamentals", "composition fundamentals", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="course_content_clarification",
        requires=("included", "landscape", "course"),
        question=(
            "Our landscape photography course covers many aspects. "
            "What specific areas are you most interested in?"
        ),
        options=(
            ("Course curriculum", "landscape course curriculum", ADVICE),
            ("Beginner suitability", "landscape course beginners", ADVICE),
            ("Equipment needed", "landscape course equipment", ADVICE),
            ("Practical sessions", "landscape course practical", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="course_clarification",
        requires=("courses",),
        question=(
            "Yes, we offer several photography courses! "
            "What type of course are you interested in?"
        ),
        options=(
            ("Online courses (free and paid)", "online photography courses", ADVICE),
            ("In-person courses in Coventry", "photography courses Coventry", EVENTS),
            ("Specific topic courses", "specialized photography courses", ADVICE),
            ("Beginner courses", "beginner photography courses", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="bluebell_workshop_clarification",
        requires=("bluebell",),
        question=(
            "We have bluebell photography workshops coming up! "
            "What would you like to know about them?"
        ),
        options=(
            ("Dates and times", "bluebell workshop dates", EVENTS),
            ("Cost and booking", "bluebell workshop cost", EVENTS),
            ("Suitable for beginners", "bluebell workshop beginners", EVENTS),
            ("Location details", "bluebell workshop location", EVENTS),
        ),
    ),
    ClarificationTemplate(
        type="macro_workshop_clarification",
        requires=("how much", "macro"),
        question=(
            "Our macro photography workshop has different pricing options. "
            "What would you like to know about the costs?"
        ),
        options=(
            ("General pricing", "macro workshop pricing", ADVICE),
            ("Specific date pricing", "specific date macro workshop", EVENTS),
            ("Package deals", "macro workshop packages", ADVICE),
            ("What's included", "macro workshop includes", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="upcoming_workshops_clarification",
        requires=("workshops", "coming up"),
        question=(
            "We have several workshops scheduled. "
            "What type of photography workshop interests you?"
        ),
        options=(
            ("Outdoor photography workshops", "outdoor photography workshops", EVENTS),
            ("All upcoming workshops", "upcoming photography workshops", EVENTS),
            ("Beginner workshops", "beginner workshops this month", EVENTS),
            ("Specific topics", "specific topic workshops", EVENTS),
        ),
    ),
    ClarificationTemplate(
        type="workshop_clarification",
        requires=("workshops",),
        question=(
            "Yes, we run photography workshops! "
            "What type of workshop are you interested in?"
        ),
        options=(
            ("Bluebell photography workshops", "bluebell photography workshops", EVENTS),
            ("Landscape photography workshops", "landscape photography workshops", EVENTS),
            ("Macro photography workshops", "macro photography workshops", EVENTS),
            ("General outdoor workshops", "outdoor photography workshops", EVENTS),
        ),
    ),
    ClarificationTemplate(
        type="lessons_clarification",
        requires=("lessons",),
        question=(
            "Yes, we offer private photography lessons! "
            "What type of lesson are you looking for?"
        ),
        options=(
            ("Face-to-face private lessons", "private photography lessons", ADVICE),
            ("Online private lessons", "online private photography lessons", ADVICE),
            ("Basic camera settings", "camera settings lessons", ADVICE),
            ("Composition and editing", "composition editing lessons", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="service_clarification",
        requires=("services",),
        question=(
            "We offer various photography services! "
            "What type of service are you looking for?"
        ),
        options=(
            ("Private lessons (face-to-face)", "private photography lessons", ADVICE),
            ("Online private lessons", "online private photography lessons", ADVICE),
            ("Group courses and workshops", "group photography courses", ADVICE),
            ("Photography advice", "photography advice and guidance", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="camera_type_clarification",
        requires=("dslr", "mirrorless"),
        question=(
            "Both have their advantages! "
            "What's your main photography interest and experience level?"
        ),
        options=(
            ("DSLR advantages", "DSLR camera advantages", ADVICE),
            ("Mirrorless advantages", "mirrorless camera advantages", ADVICE),
            ("For intermediate photographers", "camera upgrade intermediate", ADVICE),
            ("Budget considerations", "DSLR vs mirrorless budget", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="camera_clarification",
        requires=("camera should i buy",),
        question=(
            "I can help with camera recommendations! "
            "What's your photography focus and experience level?"
        ),
        options=(
            ("Beginner camera for learning", "beginner camera recommendations", ADVICE),
            ("Entry level for all types", "entry level camera all types", ADVICE),
            ("Specific photography type", "camera for specific photography", ADVICE),
            ("Budget considerations", "camera budget recommendations", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="lens_clarification",
        requires=("lens",),
        question=(
            "Great question! Lens choice depends on your photography style and budget. "
            "What are you looking for?"
        ),
        options=(
            ("Portrait photography lens", "portrait photography lens", ADVICE),
            ("Budget-friendly options", "budget lens recommendations", ADVICE),
            ("Specific camera system", "lens for specific camera", ADVICE),
            ("General purpose lens", "general purpose lens", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="technical_clarification",
        requires=("manual mode",),
        question=(
            "Great question! Manual mode has several aspects. "
            "What would you like to focus on?"
        ),
        options=(
            ("Exposure settings (aperture, shutter, ISO)", "manual exposure settings", ADVICE),
            ("Focus and composition", "manual focus and composition", ADVICE),
            ("Specific photography scenarios", "manual mode scenarios", ADVICE),
            ("Step-by-step learning", "manual mode tutorial", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="night_photography_clarification",
        requires=("night",),
        question=(
            "Night photography requires specific settings! "
            "What type of night photography are you planning?"
        ),
        options=(
            ("Astrophotography", "astrophotography settings", ADVICE),
            ("City night photography", "city night photography settings", ADVICE),
            ("Low light portraits", "low light portrait settings", ADVICE),
            ("General night photography", "general night photography settings", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="experience_clarification",
        requires=("how long", "teaching"),
        question=(
            "I've been teaching photography for many years! "
            "What would you like to know about my teaching experience?"
        ),
        options=(
            ("Teaching qualifications", "teaching qualifications", ADVICE),
            ("Years of experience", "years teaching experience", ADVICE),
            ("Teaching approach", "teaching approach and method", ADVICE),
            ("Student success stories", "student success stories", ADVICE),
        ),
    ),
    ClarificationTemplate(
        type="about_clarification",
        requires=("alan",),
        question=(
            "Alan is a professional photographer and tutor. "
            "What would you like to know about him?"
        ),
        options=(
            ("His photography experience", "Alan Ranger photography experience", ADVICE),
            ("Teaching qualifications", "Alan Ranger qualifications", ADVICE),
            ("Location and availability", "Alan Ranger location", ADVICE),
            ("Specializations", "Alan Ranger specializations", ADVICE),
        ),
    ),
)

GENERAL_TEMPLATE = ClarificationTemplate(
    type="general_clarification",
    requires=(),
    question="I can help with workshops, courses, lessons and photography advice. What are you looking for?",
    options=(
        ("Photography workshops", "photography workshops", EVENTS),
        ("Photography courses", "photography courses", EVENTS),
        ("Private lessons and services", "private photography lessons", ADVICE),
        ("Photography advice and guides", "photography advice and guidance", ADVICE),
    ),
)


def select_template(text: str) -> ClarificationTemplate:
    lc = (text or "").lower()
    for template in TEMPLATES:
        if template.matches(lc):
            return template
    return GENERAL_TEMPLATE

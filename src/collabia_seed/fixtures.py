"""Canonical Collabia seed fixtures: the desired state of a freshly seeded database.

Every record here is reconciled against the database by the seeding reconciler.
Records are keyed by natural identifiers, never by database ids:
- Users by email
- Structured interests by owning user's email
- Posts by (author email, title)
- Interest posts by (author email, exact content)
- Comments by (target post content snippet, commenter email, content)

Comment snippets are matched as substrings against interest post content, so
each snippet must occur in exactly one entry of SEED_INTEREST_POSTS.
"""
from __future__ import annotations

from typing import Any

# ---------------------------------------------------------------------------
# Shared credentials
# ---------------------------------------------------------------------------

# Every seeded account logs in with this password.
DEFAULT_SEED_PASSWORD: str = "password123"

# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

SARAH_EMAIL: str   = "sarah.python@collabia.ma"
YOUSSEF_EMAIL: str = "youssef.java@collabia.ma"
FATIMA_EMAIL: str  = "fatima.art@collabia.ma"
MEHDI_EMAIL: str   = "mehdi.python@collabia.ma"
LEILA_EMAIL: str   = "leila.uiux@collabia.ma"
OMAR_EMAIL: str    = "omar.java@collabia.ma"
IMANE_EMAIL: str   = "imane.art@collabia.ma"
AMINE_EMAIL: str   = "amine.python@collabia.ma"
SOPHIA_EMAIL: str  = "sophia.java@collabia.ma"
YASMINE_EMAIL: str = "yasmine.uiux@collabia.ma"

ALL_USER_EMAILS: list[str] = [
    SARAH_EMAIL,
    YOUSSEF_EMAIL,
    FATIMA_EMAIL,
    MEHDI_EMAIL,
    LEILA_EMAIL,
    OMAR_EMAIL,
    IMANE_EMAIL,
    AMINE_EMAIL,
    SOPHIA_EMAIL,
    YASMINE_EMAIL,
]

# Profile fields are written once on creation. The five discovery fields
# (current_book, current_game, current_skill, what_im_building, looking_for)
# are refreshed on every run.
SEED_USERS: list[dict[str, Any]] = [
    {
        "email": SARAH_EMAIL,
        "name": "Sarah El Amrani",
        "school": "ENSAM Casablanca",
        "location": "Casablanca",
        "bio": "Building AI-powered SaaS products",
        "skills": ["Python", "Machine Learning", "Django"],
        "interests": ["SAAS", "Startups", "AI"],
        "open_to_cofounder": True,
        "open_to_projects": True,
        "school_verified": True,
        "current_book": "Atomic Habits",
        "current_game": "Chess",
        "current_skill": "Machine Learning",
        "what_im_building": "An AI study planner for engineering students",
        "looking_for": "cofounder",
    },
    {
        "email": YOUSSEF_EMAIL,
        "name": "Youssef Benali",
        "school": "INPT Rabat",
        "location": "Rabat",
        "bio": "Full-stack developer passionate about startups",
        "skills": ["Java", "Spring Boot", "React"],
        "interests": ["Startups", "Web Development", "Entrepreneurship"],
        "open_to_projects": True,
        "open_to_study_partner": True,
        "school_verified": True,
        "current_book": "The Lean Startup",
        "current_game": "Valorant",
        "current_skill": "Spring Boot",
        "what_im_building": "A marketplace connecting students with freelance gigs",
        "looking_for": "team",
    },
    {
        "email": FATIMA_EMAIL,
        "name": "Fatima Zahra",
        "school": "ESAV Marrakech",
        "location": "Marrakech",
        "bio": "UI/UX designer & digital artist",
        "skills": ["Art", "Figma", "Illustration"],
        "interests": ["UI/UX", "Design", "Startups"],
        "open_to_helping_others": True,
        "open_to_projects": True,
        "school_verified": True,
        "current_book": "Atomic Habits",
        "current_game": "Animal Crossing",
        "current_skill": "Figma",
        "what_im_building": "A portfolio platform for Moroccan illustrators",
        "looking_for": "freelance",
    },
    {
        "email": MEHDI_EMAIL,
        "name": "Mehdi Idrissi",
        "school": "ENSAM Casablanca",
        "location": "Casablanca",
        "bio": "Data scientist building SaaS tools",
        "skills": ["Python", "Data Science", "TensorFlow"],
        "interests": ["SAAS", "AI", "Machine Learning"],
        "open_to_cofounder": True,
        "school_verified": True,
        "current_book": "Deep Learning with Python",
        "current_game": "Chess",
        "current_skill": "Machine Learning",
        "what_im_building": "A crop yield prediction tool for small farms",
        "looking_for": "cofounder",
    },
    {
        "email": LEILA_EMAIL,
        "name": "Leila Mansouri",
        "school": "ENSA Tangier",
        "location": "Tangier",
        "bio": "Product designer for tech startups",
        "skills": ["Art", "UI/UX", "Product Design"],
        "interests": ["UI/UX", "Startups", "Design Thinking"],
        "open_to_projects": True,
        "open_to_helping_others": True,
        "school_verified": True,
        "current_book": "Don't Make Me Think",
        "current_game": "Valorant",
        "current_skill": "Figma",
        "what_im_building": "A shared design system for early-stage startups",
        "looking_for": "team",
    },
    {
        "email": OMAR_EMAIL,
        "name": "Omar Alaoui",
        "school": "EMSI Casablanca",
        "location": "Casablanca",
        "bio": "Backend engineer, startup enthusiast",
        "skills": ["Java", "Python", "Microservices"],
        "interests": ["Startups", "SAAS", "Tech"],
        "open_to_cofounder": True,
        "open_to_projects": True,
        "school_verified": False,
        "current_book": "The Lean Startup",
        "current_game": "FIFA 24",
        "current_skill": "Kubernetes",
        "what_im_building": "A payments microservice for campus clubs",
        "looking_for": "cofounder",
    },
    {
        "email": IMANE_EMAIL,
        "name": "Imane Benjelloun",
        "school": "ESAV Marrakech",
        "location": "Marrakech",
        "bio": "Creative director & visual artist",
        "skills": ["Art", "Graphic Design", "Branding"],
        "interests": ["UI/UX", "Art", "Creativity"],
        "open_to_helping_others": True,
        "school_verified": True,
        "current_book": "Steal Like an Artist",
        "current_game": "Animal Crossing",
        "current_skill": "Procreate",
        "what_im_building": "A brand identity studio for student startups",
        "looking_for": "freelance",
    },
    {
        "email": AMINE_EMAIL,
        "name": "Amine Chakir",
        "school": "INPT Rabat",
        "location": "Rabat",
        "bio": "Full-stack dev, SaaS builder",
        "skills": ["Python", "JavaScript", "FastAPI"],
        "interests": ["SAAS", "Startups", "Web3"],
        "open_to_cofounder": True,
        "open_to_projects": True,
        "school_verified": True,
        "current_book": "Zero to One",
        "current_game": "Chess",
        "current_skill": "FastAPI",
        "what_im_building": "Analytics dashboards for Web3 wallets",
        "looking_for": "cofounder",
    },
    {
        "email": SOPHIA_EMAIL,
        "name": "Sophia Rami",
        "school": "ENSAM Casablanca",
        "location": "Casablanca",
        "bio": "Software engineer, startup co-founder",
        "skills": ["Java", "Kotlin", "Android"],
        "interests": ["Startups", "Mobile Dev", "Entrepreneurship"],
        "open_to_cofounder": True,
        "school_verified": True,
        "current_book": "Zero to One",
        "current_game": "FIFA 24",
        "current_skill": "Kotlin",
        "what_im_building": "A ride-sharing app for university campuses",
        "looking_for": "team",
    },
    {
        "email": YASMINE_EMAIL,
        "name": "Yasmine Tazi",
        "school": "ENSA Fes",
        "location": "Fes",
        "bio": "UX researcher & product designer",
        "skills": ["Art", "UI/UX", "User Research"],
        "interests": ["UI/UX", "SAAS", "Product Design"],
        "open_to_projects": True,
        "open_to_study_partner": True,
        "school_verified": True,
        "current_book": "Don't Make Me Think",
        "current_game": "Valorant",
        "current_skill": "User Research",
        "what_im_building": "A lightweight toolkit for running user interviews",
        "looking_for": "learn",
    },
]

# ---------------------------------------------------------------------------
# Structured interests (one book, one skill, one game per user)
# ---------------------------------------------------------------------------

SEED_STRUCTURED_INTERESTS: dict[str, dict[str, dict[str, Any]]] = {
    SARAH_EMAIL: {
        "book":  {"title": "Atomic Habits", "total_pages": 320, "pages_read": 145, "status": "reading"},
        "skill": {"name": "Machine Learning", "level": "intermediate", "notes": "Working through the fast.ai course"},
        "game":  {"name": "Chess", "rank": "1450 Elo", "frequency": "daily"},
    },
    YOUSSEF_EMAIL: {
        "book":  {"title": "The Lean Startup", "total_pages": 336, "pages_read": 90, "status": "reading"},
        "skill": {"name": "Spring Boot", "level": "advanced", "notes": None},
        "game":  {"name": "Valorant", "rank": "Diamond 2", "frequency": "weekly"},
    },
    FATIMA_EMAIL: {
        "book":  {"title": "Atomic Habits", "total_pages": 320, "pages_read": 210, "status": "reading"},
        "skill": {"name": "Figma", "level": "advanced", "notes": "Exploring auto layout and variables"},
        "game":  {"name": "Animal Crossing", "rank": None, "frequency": "occasionally"},
    },
    MEHDI_EMAIL: {
        "book":  {"title": "Deep Learning with Python", "total_pages": 504, "pages_read": 260, "status": "reading"},
        "skill": {"name": "Machine Learning", "level": "advanced", "notes": None},
        "game":  {"name": "Chess", "rank": "1620 Elo", "frequency": "weekly"},
    },
    LEILA_EMAIL: {
        "book":  {"title": "Don't Make Me Think", "total_pages": 216, "pages_read": 216, "status": "completed"},
        "skill": {"name": "Figma", "level": "intermediate", "notes": "Building a component library"},
        "game":  {"name": "Valorant", "rank": "Gold 3", "frequency": "weekly"},
    },
    OMAR_EMAIL: {
        "book":  {"title": "The Lean Startup", "total_pages": 336, "pages_read": 40, "status": "paused"},
        "skill": {"name": "Kubernetes", "level": "beginner", "notes": "Preparing for the CKAD"},
        "game":  {"name": "FIFA 24", "rank": "Division 3", "frequency": "daily"},
    },
    IMANE_EMAIL: {
        "book":  {"title": "Steal Like an Artist", "total_pages": 160, "pages_read": 88, "status": "reading"},
        "skill": {"name": "Procreate", "level": "advanced", "notes": None},
        "game":  {"name": "Animal Crossing", "rank": None, "frequency": "daily"},
    },
    AMINE_EMAIL: {
        "book":  {"title": "Zero to One", "total_pages": 224, "pages_read": 120, "status": "reading"},
        "skill": {"name": "FastAPI", "level": "intermediate", "notes": "Async SQLAlchemy and background tasks"},
        "game":  {"name": "Chess", "rank": "1380 Elo", "frequency": "occasionally"},
    },
    SOPHIA_EMAIL: {
        "book":  {"title": "Zero to One", "total_pages": 224, "pages_read": 30, "status": "reading"},
        "skill": {"name": "Kotlin", "level": "advanced", "notes": "Jetpack Compose migration"},
        "game":  {"name": "FIFA 24", "rank": "Division 5", "frequency": "weekly"},
    },
    YASMINE_EMAIL: {
        "book":  {"title": "Don't Make Me Think", "total_pages": 216, "pages_read": 75, "status": "reading"},
        "skill": {"name": "User Research", "level": "intermediate", "notes": None},
        "game":  {"name": "Valorant", "rank": "Silver 1", "frequency": "occasionally"},
    },
}

# ---------------------------------------------------------------------------
# Legacy posts
# ---------------------------------------------------------------------------

SEED_POSTS: list[dict[str, Any]] = [
    {
        "author_email": SARAH_EMAIL,
        "title": "Looking for a co-founder for an AI study planner",
        "description": "I have a working prototype that schedules revision sessions. Need someone strong on mobile.",
        "tags": ["AI", "SAAS", "Co-founder"],
        "interest_type": "skill",
        "interest_value": "Machine Learning",
    },
    {
        "author_email": YOUSSEF_EMAIL,
        "title": "Spring Boot study group every Saturday",
        "description": "We meet online and build a small REST API together each week.",
        "tags": ["Java", "Study Group"],
        "interest_type": "skill",
        "interest_value": "Spring Boot",
    },
    {
        "author_email": FATIMA_EMAIL,
        "title": "Designers wanted for a student hackathon team",
        "description": "Hackathon in Marrakech next month. We have two developers and need one more designer.",
        "tags": ["Design", "Hackathon"],
    },
    {
        "author_email": MEHDI_EMAIL,
        "title": "Reading Deep Learning with Python together",
        "description": "Weekly check-ins on chapters and exercises. Join if you are around chapter 5.",
        "tags": ["AI", "Books"],
        "interest_type": "book",
        "interest_value": "Deep Learning with Python",
        "progress_snapshot": 260,
    },
    {
        "author_email": OMAR_EMAIL,
        "title": "Backend mentor available for beginners",
        "description": "Happy to review code and explain microservice patterns over coffee in Casablanca.",
        "tags": ["Backend", "Mentoring"],
    },
    {
        "author_email": AMINE_EMAIL,
        "title": "Chess club at INPT is back",
        "description": "Casual games on Thursdays, all levels welcome.",
        "tags": ["Chess", "Clubs"],
        "interest_type": "game",
        "interest_value": "Chess",
    },
    {
        "author_email": SOPHIA_EMAIL,
        "title": "Android developer looking for a startup project",
        "description": "Five years of Kotlin. Interested in mobility and fintech ideas.",
        "tags": ["Android", "Mobile Dev", "Startups"],
        "interest_type": "skill",
        "interest_value": "Kotlin",
    },
    {
        "author_email": YASMINE_EMAIL,
        "title": "Volunteers needed for usability testing",
        "description": "30 minute sessions testing a student banking app. Snacks provided.",
        "tags": ["UX", "Research"],
    },
]

# ---------------------------------------------------------------------------
# Interest posts
# ---------------------------------------------------------------------------

SEED_INTEREST_POSTS: list[dict[str, Any]] = [
    # Books
    {
        "author_email": SARAH_EMAIL,
        "type": "book",
        "interest_value": "Atomic Habits",
        "content": "The chapter on habit stacking finally made my morning routine stick. Two weeks in and still going!",
        "progress_snapshot": 145,
    },
    {
        "author_email": FATIMA_EMAIL,
        "type": "book",
        "interest_value": "Atomic Habits",
        "content": "Using the two-minute rule to sketch every single day. Small wins add up.",
        "progress_snapshot": 210,
    },
    {
        "author_email": YOUSSEF_EMAIL,
        "type": "book",
        "interest_value": "The Lean Startup",
        "content": "Build-measure-learn sounds obvious until you try it on a real product. Rethinking my MVP scope.",
        "progress_snapshot": 90,
    },
    {
        "author_email": OMAR_EMAIL,
        "type": "book",
        "interest_value": "The Lean Startup",
        "content": "Paused at the pivot chapter. Anyone want to discuss validated learning this weekend?",
        "progress_snapshot": 40,
    },
    {
        "author_email": MEHDI_EMAIL,
        "type": "book",
        "interest_value": "Deep Learning with Python",
        "content": "Halfway through and the convnet chapter is gold. The visualisation examples are worth it alone.",
        "progress_snapshot": 260,
    },
    {
        "author_email": LEILA_EMAIL,
        "type": "book",
        "interest_value": "Don't Make Me Think",
        "content": "Finished it! Every designer should read the chapter on navigation at least twice.",
        "progress_snapshot": 216,
    },
    {
        "author_email": AMINE_EMAIL,
        "type": "book",
        "interest_value": "Zero to One",
        "content": "Thiel's question about secrets nobody agrees with is harder to answer than it looks.",
        "progress_snapshot": 120,
    },
    # Skills
    {
        "author_email": SARAH_EMAIL,
        "type": "skill",
        "interest_value": "Machine Learning",
        "content": "Trained my first image classifier on Moroccan street signs. 91% accuracy on the validation set.",
    },
    {
        "author_email": MEHDI_EMAIL,
        "type": "skill",
        "interest_value": "Machine Learning",
        "content": "Feature engineering beat a bigger model again today. Data quality matters more than depth.",
    },
    {
        "author_email": FATIMA_EMAIL,
        "type": "skill",
        "interest_value": "Figma",
        "content": "Variables in Figma changed how I handle dark mode. No more duplicated frames.",
    },
    {
        "author_email": LEILA_EMAIL,
        "type": "skill",
        "interest_value": "Figma",
        "content": "Sharing my component library template for student projects, ping me if you want a copy.",
    },
    {
        "author_email": SOPHIA_EMAIL,
        "type": "skill",
        "interest_value": "Kotlin",
        "content": "Migrated our whole onboarding flow to Jetpack Compose. Half the code, twice the readability.",
    },
    {
        "author_email": OMAR_EMAIL,
        "type": "skill",
        "interest_value": "Kubernetes",
        "content": "Finally understand the difference between a Deployment and a StatefulSet. CKAD prep continues.",
    },
    # Games
    {
        "author_email": SARAH_EMAIL,
        "type": "game",
        "interest_value": "Chess",
        "content": "Crossed 1450 Elo after a week of daily puzzles. The Sicilian is starting to make sense.",
    },
    {
        "author_email": AMINE_EMAIL,
        "type": "game",
        "interest_value": "Chess",
        "content": "Lost three games in a row to the London System. Time to study some openings.",
    },
    {
        "author_email": YOUSSEF_EMAIL,
        "type": "game",
        "interest_value": "Valorant",
        "content": "Looking for a duo for ranked this weekend, Diamond lobby. Good comms required.",
    },
    {
        "author_email": IMANE_EMAIL,
        "type": "game",
        "interest_value": "Animal Crossing",
        "content": "Redesigned my whole island with a Marrakech riad theme. Dream address available on request.",
    },
    {
        "author_email": SOPHIA_EMAIL,
        "type": "game",
        "interest_value": "FIFA 24",
        "content": "Weekend League grind starts Friday night. Who else is playing on PS5?",
    },
]

# ---------------------------------------------------------------------------
# Interest comments
# ---------------------------------------------------------------------------

# post_snippet is matched as a substring against InterestPost.content.
SEED_INTEREST_COMMENTS: list[dict[str, Any]] = [
    {
        "post_snippet": "habit stacking",
        "author_email": FATIMA_EMAIL,
        "content": "Same here! I stack sketching right after my morning coffee.",
    },
    {
        "post_snippet": "Build-measure-learn",
        "author_email": OMAR_EMAIL,
        "content": "Happy to trade notes, I am rereading that part too.",
    },
    {
        "post_snippet": "Moroccan street signs",
        "author_email": MEHDI_EMAIL,
        "content": "Impressive! Did you use transfer learning or train from scratch?",
    },
    {
        "post_snippet": "component library template",
        "author_email": YASMINE_EMAIL,
        "content": "Would love a copy for our research toolkit project.",
    },
    {
        "post_snippet": "London System",
        "author_email": SARAH_EMAIL,
        "content": "Try the Queen's Indian setup against it, it worked for me.",
    },
    {
        "post_snippet": "Marrakech riad theme",
        "author_email": FATIMA_EMAIL,
        "content": "This is gorgeous, sending you a visit request tonight.",
    },
]

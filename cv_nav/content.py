"""Résumé content tree.

Every function here is a Node producer: pure, fast, and safe to call again.
A new section only needs a producer plus a Branch pointing at it.
"""
from __future__ import annotations

from .tui.entries import Branch, Leaf, Node

TITLE = "Bhuwan Panta's CV"


# ═══════════════════════════════════════════════════════════════════════════════
# ROOT
# ═══════════════════════════════════════════════════════════════════════════════

def root() -> Node:
    return Node(
        title=TITLE,
        entries=(
            Branch("Introduction", "Basic Information and Contact", introduction),
            Branch("Skills", "Technical and Non-Technical Proficiencies", skills),
            Branch("Experience", "Details of Professional Experience", experience),
            Branch("Projects", "Details of Self-Employed Projects", projects),
            Branch("Education", "Academic Background", education),
            Branch("Languages", "Language Proficiencies", languages),
        ),
    )


def introduction() -> Node:
    return Node(
        title="Introduction",
        entries=(
            Leaf("Contact", "Email: ricky.pantha@gmail.com | Phone: +977-9844718578 | Location: Lalitpur, Nepal"),
            Leaf(
                "Summary",
                "Results-driven and solution-oriented Software Engineer adept at analyzing and "
                "developing software to achieve scalable solutions. Skilled in fostering "
                "collaboration, optimizing services, and delivering projects on time and within scope.",
            ),
            Leaf("LinkedIn", "linkedin.com/in/bhuwan-panta"),
            Leaf("Github", "github.com/bhuwan-panta"),
        ),
    )


def skills() -> Node:
    return Node(
        title="Skills",
        entries=(
            Leaf("Programming Languages", "Python, Go, JavaScript"),
            Leaf("Frameworks", "FastAPI, Flask, Django, Node (Runtime), Express"),
            Leaf("Databases", "MongoDB, MySQL, PostgreSQL"),
            Leaf("Cloud Services", "AWS (S3, Lambda)"),
            Leaf("Search Technologies", "Vector Search, Elasticsearch, Fuzzy Search"),
            Leaf(
                "Other (Technical)",
                "REST API, OPA, Rego, SOAP XML, Docker, Kubernetes, RabbitMQ, Microservices",
            ),
            Leaf("Other (Non-Technical)", "Client Communication, Product Initiatives, Leadership"),
        ),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# EXPERIENCE
# ═══════════════════════════════════════════════════════════════════════════════

def experience() -> Node:
    return Node(
        title="Experience",
        entries=(
            Branch("Software Engineer, Tekvortex", "Bhaktapur, Nepal | Jan 2021 – Jan 2022", tekvortex),
            Branch("Software Engineer, RippeyAI", "Louisville, CO | Aug 2022 – Jul 2024", rippey_ai),
            Branch("Software Engineer, LancemeUp", "Lalitpur, Nepal | Feb 2022 – Jul 2022", lanceme_up),
        ),
    )


def tekvortex() -> Node:
    return Node(
        title="Tekvortex - Software Engineer",
        entries=(
            Leaf("MITM Proxy", "Working on BAF(Build Application Firewall) Product"),
        ),
    )


def rippey_ai() -> Node:
    return Node(
        title="RippeyAI - Software Engineer",
        entries=(
            Leaf(
                "Deployment Free API Integration",
                "Implemented Domain-Driven Design; onboarded 10 customers/8 carriers; consolidated "
                "microservices (20% cost reduction); reduced onboarding time by 60%.",
            ),
            Leaf(
                "Microsoft Teams Integration",
                "Constructed seamless MS Teams integration for chatbots; reduced customer onboarding "
                "to 30 mins; implemented real-time failover (50% response time reduction).",
            ),
            Leaf(
                "Enhanced Email Parsing Service",
                "Improved email parsing for foreign characters (5% data integrity); increased "
                "efficiency for diverse attachments (15%); increased overall accuracy by 20%.",
            ),
            Leaf(
                "Developed Internal Tools",
                "Enhanced accuracy for date/currency formats (10% error reduction); created Universal "
                "Unit Conversion tool (~35% processing speed increase); developed vector search for "
                "charge codes (30% search accuracy); automated Excel ops (80% time reduction).",
            ),
            Leaf(
                "Built Customizable Rate Engine",
                "Analyzed libraries (15% dependency cost reduction); engineered Rate Engine (40% config "
                "time reduction); collaborated with CTO (20% timeline reduction); participated in "
                "meetings (30% project success rate).",
            ),
        ),
    )


def lanceme_up() -> Node:
    return Node(
        title="LancemeUp - Software Engineer",
        entries=(
            Leaf(
                "Enhanced Legacy Project",
                "Maintained backend for Medisoft independently; understood codebase quickly (50% "
                "transition time reduction); interacted with clients (25% client satisfaction increase).",
            ),
        ),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PROJECTS
# ═══════════════════════════════════════════════════════════════════════════════

def projects() -> Node:
    return Node(
        title="Solopreneur Projects",
        entries=(
            Branch("Share Excel", "Nawalparasi, Nepal | Feb 2020 - Apr 2021", share_excel),
            Branch("Automatic Grade Ledger Application", "Nawalparasi, Nepal | Feb 2020 - Apr 2021", grade_ledger),
        ),
    )


def share_excel() -> Node:
    return Node(
        title="Share Excel Project",
        entries=(
            Leaf("Description", "Developed stock portfolio management using Excel/VBA for ~100 users."),
            Leaf(
                "Features",
                "Live portfolio tracking, watchlist, interactive dashboards, near real-time stock "
                "prices (40% user engagement).",
            ),
            Leaf(
                "Methodology",
                "Applied Agile; continuously improved based on feedback (1000% product value increase).",
            ),
        ),
    )


def grade_ledger() -> Node:
    return Node(
        title="Automatic Grade Ledger Application",
        entries=(
            Leaf(
                "Description",
                "Developed an application to assist teachers in publishing results from home during "
                "COVID (benefited over 10 teachers).",
            ),
            Leaf(
                "Extended Scope",
                "Built comprehensive School Management Application (admission, accounting, result "
                "management); decreased application usage by 60% (likely meant increased "
                "efficiency/reduced manual work).",
            ),
        ),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# EDUCATION & LANGUAGES
# ═══════════════════════════════════════════════════════════════════════════════

def education() -> Node:
    return Node(
        title="Education",
        entries=(
            Leaf(
                "Bachelor of Computer Science and Information Technology",
                "Bhaktapur Multiple Campus, Bhaktapur, Nepal | Apr 2021 – Apr 2025",
            ),
            Leaf("Science / Physics", "Tilottama Higher Secondary School, Butwal, Nepal | Aug 2018 – Sept 2020"),
        ),
    )


def languages() -> Node:
    return Node(
        title="Languages",
        entries=(
            Leaf("Nepali", "Native"),
            Leaf("English", "Advanced"),
            Leaf("Hindi", "Conversational"),
            Leaf("German", "Basic"),
        ),
    )

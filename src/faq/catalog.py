"""Built-in Sentinel Secure Services FAQ content."""

from __future__ import annotations

from .knowledge import KnowledgeBase, KnowledgeEntry

WELCOME_TEXT = (
    "Welcome to Sentinel Secure Services. Ask me about services, monitoring, "
    "incident reporting, compliance documents, or the client portal."
)

FALLBACK_TEXT = (
    "I can help with services, monitoring, incident reporting, access logs, "
    "compliance documents, and consultation requests. Ask a specific question "
    "(for example: ‘Do you offer 24/7 monitoring?’)."
)

DEFAULT_SUGGESTIONS = (
    "What services do you provide?",
    "Do you offer 24/7 monitoring?",
    "Are your guards licensed and trained?",
    "How do I request a security consultation?",
    "How do I access the client dashboard?",
)

SENTINEL_ENTRIES = (
    KnowledgeEntry(
        id="services-overview",
        question="What services do you provide?",
        keywords=("services", "provide", "offer", "capabilities", "solutions"),
        answer=(
            "Sentinel Secure Services provides integrated security programs including "
            "physical guarding, access control management, patrol and perimeter security, "
            "CCTV monitoring, remote surveillance, alarm management, risk assessments, "
            "compliance consulting, and coordinated emergency response."
        ),
    ),
    KnowledgeEntry(
        id="monitoring-247",
        question="Do you offer 24/7 monitoring?",
        keywords=("24/7", "monitoring", "command", "control", "soc", "after hours"),
        answer=(
            "Yes. Our command & control operations support 24/7 monitoring options, "
            "including after-hours escalation workflows, event triage, and documented "
            "incident handling. Coverage is tailored based on your site risk and "
            "operating hours."
        ),
    ),
    KnowledgeEntry(
        id="industries",
        question="Which industries do you serve?",
        keywords=(
            "industries", "corporate", "manufacturing", "warehouse", "hospital",
            "clinic", "education", "residential", "retail",
        ),
        answer=(
            "We serve commercial, industrial, residential, and institutional clients. "
            "Typical coverage includes corporate offices, manufacturing and warehousing, "
            "hospitals and clinics, educational institutions, residential communities, "
            "and retail or shopping centers."
        ),
    ),
    KnowledgeEntry(
        id="guards",
        question="Are your guards licensed and trained?",
        keywords=("guards", "licensed", "trained", "personnel", "uniformed", "background"),
        answer=(
            "Yes. Our security personnel are licensed and trained for site SOPs, access "
            "governance, de-escalation, patrol discipline, incident documentation, and "
            "escalation protocols. Training plans are aligned to your operating "
            "environment."
        ),
    ),
    KnowledgeEntry(
        id="incident-reporting",
        question="How do you handle incident reporting?",
        keywords=("incident", "report", "reporting", "analytics", "timeline", "severity"),
        answer=(
            "Incidents are recorded with timestamps, severity classification, officer "
            "notes, actions taken, and closure status. The client dashboard demonstrates "
            "downloadable report summaries and structured analytics for service reviews "
            "and audits."
        ),
    ),
    KnowledgeEntry(
        id="access-logs",
        question="Do you maintain access control logs?",
        keywords=("access", "logs", "visitor", "employee", "entry", "badge"),
        answer=(
            "Yes. We maintain structured access logs for employee entry and visitor "
            "access (date/time, site, outcome, and method). In production deployments, "
            "logs are governed by role-based access and audit trails."
        ),
    ),
    KnowledgeEntry(
        id="compliance",
        question="Do you support compliance and documentation?",
        keywords=("compliance", "iso", "privacy", "audit", "sla", "documents", "insurance"),
        answer=(
            "Yes. Our programs are designed to be compliance-ready with structured "
            "documentation. The portal includes compliance certificates, SLA agreements, "
            "and insurance documents with secure viewing and download controls (demo)."
        ),
    ),
    KnowledgeEntry(
        id="emergency",
        question="Can you support emergency response and liaison?",
        keywords=("emergency", "evacuation", "liaison", "law", "enforcement", "incident handling"),
        answer=(
            "Yes. We coordinate incident handling, emergency evacuation support, and "
            "law-enforcement liaison when required. Response workflows follow predefined "
            "escalation playbooks and are documented for post-incident review."
        ),
    ),
    KnowledgeEntry(
        id="consultation",
        question="How do I request a security consultation?",
        keywords=("consultation", "request", "assessment", "audit", "site"),
        answer=(
            "You can request a security consultation directly on the Home page. We "
            "typically start with a risk assessment and site audit, then deliver a "
            "customized security plan with coverage and reporting recommendations."
        ),
    ),
    KnowledgeEntry(
        id="client-login",
        question="How do I access the client dashboard?",
        keywords=("login", "client", "dashboard", "portal", "register"),
        answer=(
            "Use Client Login to access the dashboard. If you don’t have an account, "
            "register first. For this demo site, you can use the provided demo "
            "credentials on the Login page to sign in instantly."
        ),
    ),
)


def default_knowledge_base() -> KnowledgeBase:
    return KnowledgeBase(SENTINEL_ENTRIES)

"""Демонстрационные данные: кабинеты, клиенты, дела, папки и документы.

Документы генерируются детерминированно (фиксированный seed), чтобы
порядок и даты не менялись между запусками.
"""
import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from app.domains.documents.entities import (
    Activity, ActivityAction, Actor, Cabinet, Client, Document, DocumentType, Matter
)

SEED = 2024
DEMO_PASSWORD = "password123"

RANGE_START = datetime(2023, 1, 1, tzinfo=timezone.utc)
RANGE_END = datetime(2025, 1, 1, tzinfo=timezone.utc)
FOLDER_TIMESTAMP = "2024-01-01T00:00:00Z"

USERS = [
    {
        "id": "1",
        "name": "Sarah Anderson",
        "email": "sarah.anderson@law.com",
        "avatar_url": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?auto=format&fit=crop&q=80&w=150&h=150",
        "role": "Senior Partner",
        "organization_id": "1",
    },
    {
        "id": "2",
        "name": "Michael Chen",
        "email": "michael.chen@law.com",
        "avatar_url": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?auto=format&fit=crop&q=80&w=150&h=150",
        "role": "Associate",
        "organization_id": "1",
    },
    {
        "id": "3",
        "name": "Emily Rodriguez",
        "email": "emily.rodriguez@law.com",
        "avatar_url": "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?auto=format&fit=crop&q=80&w=150&h=150",
        "role": "Partner",
        "organization_id": "2",
    },
]

CABINETS = [
    Cabinet(id="1", name="Corporate Law"),
    Cabinet(id="2", name="Real Estate"),
    Cabinet(id="3", name="Intellectual Property"),
    Cabinet(id="4", name="Litigation"),
    Cabinet(id="5", name="Employment Law"),
]

CLIENTS = [
    Client(id="1", name="Acme Corporation", cabinet_id="1"),
    Client(id="2", name="TechStart Inc", cabinet_id="1"),
    Client(id="3", name="Global Innovations Ltd", cabinet_id="1"),
    Client(id="4", name="Future Enterprises", cabinet_id="1"),
    Client(id="5", name="Global Properties LLC", cabinet_id="2"),
    Client(id="6", name="Urban Development Co", cabinet_id="2"),
    Client(id="7", name="Landmark Holdings", cabinet_id="2"),
    Client(id="8", name="Innovation Labs", cabinet_id="3"),
    Client(id="9", name="Tech Patents Inc", cabinet_id="3"),
    Client(id="10", name="Digital Rights Group", cabinet_id="3"),
    Client(id="11", name="Defense Dynamics", cabinet_id="4"),
    Client(id="12", name="Legal Shield Corp", cabinet_id="4"),
    Client(id="13", name="HR Solutions Inc", cabinet_id="5"),
    Client(id="14", name="Workforce Management", cabinet_id="5"),
]

MATTERS = [
    Matter(id="1", name="Corporate Restructuring", client_id="1"),
    Matter(id="2", name="Annual Compliance", client_id="1"),
    Matter(id="3", name="Board Governance", client_id="1"),
    Matter(id="4", name="Seed Funding Round", client_id="2"),
    Matter(id="5", name="Series A Financing", client_id="2"),
    Matter(id="6", name="Employee Stock Options", client_id="2"),
    Matter(id="7", name="Property Acquisition - Downtown", client_id="5"),
    Matter(id="8", name="Commercial Lease Agreements", client_id="5"),
    Matter(id="9", name="Property Development Project", client_id="5"),
    Matter(id="10", name="Patent Filing - AI Technology", client_id="8"),
    Matter(id="11", name="Software Licensing", client_id="8"),
    Matter(id="12", name="IP Strategy Review", client_id="8"),
    Matter(id="13", name="Commercial Dispute", client_id="11"),
    Matter(id="14", name="Contract Enforcement", client_id="11"),
    Matter(id="15", name="Employment Policy Review", client_id="13"),
    Matter(id="16", name="Workplace Investigation", client_id="13"),
]

# (id, name, cabinet_id, client_id, matter_id, parent_id, path)
FOLDERS: List[Tuple[str, str, str, str, str, Optional[str], str]] = [
    ("folder-templates", "Templates", "1", "", "", None, "/templates"),
    ("folder-contracts", "Contracts", "1", "", "", "folder-templates", "/templates/contracts"),
    ("folder-policies", "Policies", "1", "", "", "folder-templates", "/templates/policies"),
    ("folder-corporate-governance", "Corporate Governance", "1", "", "", None, "/corporate-governance"),
    ("folder-board-materials", "Board Materials", "1", "", "", "folder-corporate-governance", "/corporate-governance/board-materials"),
    ("folder-compliance", "Compliance", "1", "", "", None, "/compliance"),
    ("folder-property-docs", "Property Documents", "2", "", "", None, "/property-documents"),
    ("folder-leases", "Lease Agreements", "2", "", "", "folder-property-docs", "/property-documents/leases"),
    ("folder-purchase-agreements", "Purchase Agreements", "2", "", "", "folder-property-docs", "/property-documents/purchase-agreements"),
    ("folder-zoning", "Zoning & Land Use", "2", "", "", None, "/zoning"),
    ("folder-permits", "Permits & Approvals", "2", "", "", "folder-zoning", "/zoning/permits"),
    ("folder-patents", "Patents", "3", "", "", None, "/patents"),
    ("folder-patent-templates", "Patent Templates", "3", "", "", "folder-patents", "/patents/templates"),
    ("folder-trademarks", "Trademarks", "3", "", "", None, "/trademarks"),
    ("folder-trademark-filings", "Trademark Filings", "3", "", "", "folder-trademarks", "/trademarks/filings"),
    ("folder-copyright", "Copyright", "3", "", "", None, "/copyright"),
    ("folder-pleadings", "Pleadings", "4", "", "", None, "/pleadings"),
    ("folder-motions", "Motions", "4", "", "", "folder-pleadings", "/pleadings/motions"),
    ("folder-discovery", "Discovery", "4", "", "", None, "/discovery"),
    ("folder-depositions", "Depositions", "4", "", "", "folder-discovery", "/discovery/depositions"),
    ("folder-policies-procedures", "Policies & Procedures", "5", "", "", None, "/policies-procedures"),
    ("folder-handbooks", "Employee Handbooks", "5", "", "", "folder-policies-procedures", "/policies-procedures/handbooks"),
    ("folder-compliance-training", "Compliance Training", "5", "", "", None, "/compliance-training"),
    ("folder-investigations", "Investigations", "5", "", "", None, "/investigations"),
    ("folder-due-diligence", "Due Diligence", "1", "1", "1", None, "/due-diligence"),
    ("folder-financial", "Financial Reports", "1", "1", "1", "folder-due-diligence", "/due-diligence/financial"),
    ("folder-legal", "Legal Analysis", "1", "1", "1", "folder-due-diligence", "/due-diligence/legal"),
]

# (prefix, count, parent_id, matter_id, client_id, cabinet_id)
GENERATED = [
    ("contracts", 50, "folder-contracts", "", "", "1"),
    ("policies", 50, "folder-policies", "", "", "1"),
    ("financial", 50, "folder-financial", "1", "1", "1"),
    ("legal", 50, "folder-legal", "1", "1", "1"),
    ("leases", 50, "folder-leases", "", "", "2"),
    ("patents", 50, "folder-patents", "", "", "3"),
    ("board-materials", 20, "folder-board-materials", "", "", "1"),
    ("compliance", 20, "folder-compliance", "", "", "1"),
    ("purchase-agreements", 20, "folder-purchase-agreements", "", "", "2"),
    ("permits", 20, "folder-permits", "", "", "2"),
    ("patent-templates", 20, "folder-patent-templates", "", "", "3"),
    ("trademark-filings", 20, "folder-trademark-filings", "", "", "3"),
    ("motions", 20, "folder-motions", "", "", "4"),
    ("depositions", 20, "folder-depositions", "", "", "4"),
    ("handbooks", 20, "folder-handbooks", "", "", "5"),
    ("investigations", 20, "folder-investigations", "", "", "5"),
]


def _actors() -> List[Actor]:
    return [Actor(id=user["id"], name=user["name"], avatar_url=user["avatar_url"]) for user in USERS]


def _random_timestamp(rng: random.Random) -> str:
    span = (RANGE_END - RANGE_START).total_seconds()
    moment = RANGE_START + timedelta(seconds=rng.uniform(0, span))
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_folders() -> List[Document]:
    owner = _actors()[0]
    return [
        Document(
            id=folder_id,
            name=name,
            type=DocumentType.FOLDER,
            cabinet_id=cabinet_id,
            client_id=client_id,
            matter_id=matter_id,
            parent_id=parent_id,
            path=path,
            created_at=FOLDER_TIMESTAMP,
            updated_at=FOLDER_TIMESTAMP,
            last_active_at=FOLDER_TIMESTAMP,
            total_versions=1,
            added_by=owner,
            last_modified_by=owner,
            your_activity=Activity(action=ActivityAction.CREATED, date=FOLDER_TIMESTAMP),
        )
        for folder_id, name, cabinet_id, client_id, matter_id, parent_id, path in FOLDERS
    ]


def generate_documents(
    rng: random.Random,
    prefix: str,
    count: int,
    parent_id: str,
    matter_id: str,
    client_id: str,
    cabinet_id: str,
) -> List[Document]:
    actors = _actors()
    actions = list(ActivityAction)
    documents = []
    for i in range(1, count + 1):
        documents.append(
            Document(
                id=f"{prefix}-{i}",
                name=f"{prefix}-document-{i}.pdf",
                type=DocumentType.FILE,
                cabinet_id=cabinet_id,
                client_id=client_id,
                matter_id=matter_id,
                parent_id=parent_id,
                path=f"/{prefix}/document-{i}.pdf",
                created_at=_random_timestamp(rng),
                updated_at=_random_timestamp(rng),
                last_active_at=_random_timestamp(rng),
                total_versions=rng.randint(1, 5),
                added_by=rng.choice(actors),
                last_modified_by=rng.choice(actors),
                your_activity=Activity(action=rng.choice(actions), date=_random_timestamp(rng)),
            )
        )
    return documents


def build_documents(seed: int = SEED) -> List[Document]:
    rng = random.Random(seed)
    documents = build_folders()
    for prefix, count, parent_id, matter_id, client_id, cabinet_id in GENERATED:
        documents.extend(generate_documents(rng, prefix, count, parent_id, matter_id, client_id, cabinet_id))
    return documents

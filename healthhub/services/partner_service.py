"""Onboarding and management of partner organisations (pathology centers, pharmacies).

A partner always comes with its own Admin account. Creation goes through a
UnitOfWork so the pair is written all-or-nothing:

    1. email/phone must be unused among partners of that kind and among admins
    2. insert Admin (role = partner kind)
    3. insert partner with adminId
    4. save Admin with the partner back-reference
"""
import asyncio
from dataclasses import dataclass
from typing import Type

from beanie import PydanticObjectId as OID
from beanie.exceptions import RevisionIdWasChanged
from beanie.operators import In
from pymongo.errors import DuplicateKeyError

from healthhub.constants import Role
from healthhub.exceptions import AuthorizationError, ConflictError, ValidationError
from healthhub.models import Admin
from healthhub.models.base import TimestampedDocument
from healthhub.security import hash_password
from healthhub.services.pagination import Page, PageParams, paginate, search_filter
from healthhub.services.unit_of_work import UnitOfWork
from healthhub.utils.ids import get_or_404
from healthhub.utils.logger import get_logger

logger = get_logger("partner_service")


@dataclass(frozen=True)
class PartnerKind:
    model: Type[TimestampedDocument]
    role: Role
    name_field: str  # display name, copied to the Admin account
    id_field: str  # request field carrying the partner id, also the Admin back-reference
    label: str
    search_fields: tuple[str, ...]


class PartnerService:
    def __init__(self, kind: PartnerKind):
        self.kind = kind

    async def _find_conflicts(self, email: str, phone: str, session=None):
        """Look up the partner and admin collections for an email or phone clash.

        A client session allows one operation at a time, so inside a
        transaction the lookups run in turn; without one they run concurrently.
        """
        identity = {"$or": [{"email": email}, {"phoneNumber": phone}]}
        if session is None:
            return tuple(
                await asyncio.gather(
                    self.kind.model.find_one(identity),
                    Admin.find_one(identity),
                )
            )
        existing_partner = await self.kind.model.find_one(identity, session=session)
        existing_admin = await Admin.find_one(identity, session=session)
        return existing_partner, existing_admin

    async def _phone_taken(self, partner: TimestampedDocument, phone: str, session=None) -> bool:
        """True when another partner of this kind or another admin holds `phone`."""
        other_partner = await self.kind.model.find_one(
            {"phoneNumber": phone, "_id": {"$ne": partner.id}}, session=session
        )
        if other_partner:
            return True
        other_admin = await Admin.find_one(
            {"phoneNumber": phone, "_id": {"$ne": partner.adminId}}, session=session
        )
        return other_admin is not None

    async def create(self, fields: dict, password: str) -> tuple[Admin, TimestampedDocument]:
        """Create the partner and its admin atomically; returns (admin, partner)."""
        kind = self.kind
        email, phone = fields["email"], fields["phoneNumber"]
        try:
            async with UnitOfWork() as uow:
                existing_partner, existing_admin = await self._find_conflicts(
                    email, phone, session=uow.session
                )
                if existing_partner or existing_admin:
                    raise ConflictError("Email or phone already exists")

                admin = Admin(
                    name=fields[kind.name_field],
                    email=email,
                    phoneNumber=phone,
                    password=hash_password(password),
                    role=kind.role,
                    avatar=None,
                    isActive=True,
                )
                await uow.insert(admin)

                partner = kind.model(**fields, adminId=admin.id)
                await uow.insert(partner)

                setattr(admin, kind.id_field, partner.id)
                await uow.save(admin)
        except DuplicateKeyError as e:
            # unique index caught a concurrent onboarding with the same identity
            raise ConflictError("Email or phone already exists") from e

        logger.info(f"{kind.label} {partner.id} onboarded with admin {admin.id}")
        return admin, partner

    async def get(self, partner_id: str) -> TimestampedDocument:
        return await get_or_404(
            self.kind.model, partner_id, self.kind.id_field, f"{self.kind.label} not found"
        )

    async def get_with_admin(self, partner_id: str) -> dict:
        partner = await self.get(partner_id)
        data = partner.to_public()
        admin = await Admin.get(partner.adminId) if partner.adminId else None
        data["admin"] = admin.to_public() if admin else None
        return data

    async def _attach_admins(self, page: Page) -> Page:
        admin_ids = list({OID(item["adminId"]) for item in page.items if item.get("adminId")})
        admins = await Admin.find(In(Admin.id, admin_ids)).to_list() if admin_ids else []
        admin_map = {str(a.id): a.to_public() for a in admins}
        for item in page.items:
            item["admin"] = admin_map.get(item.get("adminId"))
        return page

    async def list_all(self, params: PageParams) -> Page:
        page = await paginate(self.kind.model, params)
        return await self._attach_admins(page)

    async def search(self, term: str | None, params: PageParams) -> Page:
        filters = search_filter(term, self.kind.search_fields)
        return await paginate(self.kind.model, params, filters)

    async def update(self, partner_id: str, changes: dict) -> TimestampedDocument:
        if not changes:
            raise ValidationError("No fields provided for update")
        partner = await self.get(partner_id)
        phone = changes.get("phoneNumber")
        if phone == partner.phoneNumber:
            phone = None
        try:
            async with UnitOfWork() as uow:
                if phone and await self._phone_taken(partner, phone, session=uow.session):
                    raise ConflictError("Email or phone already exists")
                for key, value in changes.items():
                    setattr(partner, key, value)
                await uow.save(partner)

                # the owning admin carries the same phone
                if phone and partner.adminId:
                    admin = await Admin.get(partner.adminId, session=uow.session)
                    if admin:
                        admin.phoneNumber = phone
                        await uow.save(admin)
        except (DuplicateKeyError, RevisionIdWasChanged) as e:
            # save() upserts, so a unique index clash surfaces as RevisionIdWasChanged
            raise ConflictError("Email or phone already exists") from e
        return partner

    async def delete(self, partner_id: str) -> None:
        """Delete the partner and the admin account it owns."""
        partner = await self.get(partner_id)
        async with UnitOfWork() as uow:
            if partner.adminId:
                admin = await Admin.get(partner.adminId, session=uow.session)
                if admin:
                    await admin.delete(session=uow.session)
            await partner.delete(session=uow.session)
        logger.info(f"{self.kind.label} {partner.id} deleted with admin {partner.adminId}")

    async def ensure_owned_by(self, actor: Admin, partner_id: str) -> None:
        """Scoped admins may only touch the partner they are linked to."""
        if actor.role == Role.SUPERADMIN:
            return
        linked = getattr(actor, self.kind.id_field, None)
        if actor.role != self.kind.role or str(linked) != str(partner_id):
            raise AuthorizationError(f"You can only manage your own {self.kind.label.lower()}")

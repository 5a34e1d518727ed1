"""All-or-nothing writes spanning several collections.

    async with UnitOfWork() as uow:
        existing = await Admin.find_one(..., session=uow.session)
        await uow.insert(admin)
        await uow.insert(center)
        await uow.save(admin)

Leaving the block normally commits; any exception aborts. When the deployment
has no transaction support (standalone mongod, MONGODB_TRANSACTIONS=false) the
documents inserted through the unit of work are deleted again, newest first.
The client session is ended on every exit path.
"""
from beanie import Document

from healthhub.config import get_settings
from healthhub.database import get_client
from healthhub.exceptions import InfrastructureError
from healthhub.utils.logger import get_logger

logger = get_logger("unit_of_work")


class UnitOfWork:
    def __init__(self, use_transactions: bool | None = None):
        if use_transactions is None:
            use_transactions = get_settings().MONGODB_TRANSACTIONS
        self.use_transactions = use_transactions
        self.session = None
        self._inserted: list[Document] = []

    async def __aenter__(self) -> "UnitOfWork":
        if self.use_transactions:
            self.session = await get_client().start_session()
            self.session.start_transaction()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None:
                await self._commit()
            else:
                logger.warning(f"Rolling back unit of work: {exc_type.__name__}: {exc}")
                await self._rollback()
        finally:
            if self.session is not None:
                await self.session.end_session()
                self.session = None
        return False

    async def insert(self, document: Document) -> Document:
        await document.insert(session=self.session)
        self._inserted.append(document)
        return document

    async def save(self, document: Document) -> Document:
        if hasattr(document, "touch"):
            document.touch()
        await document.save(session=self.session)
        return document

    async def _commit(self) -> None:
        if self.session is None:
            return
        try:
            await self.session.commit_transaction()
        except Exception as e:
            logger.error(f"Transaction commit failed: {e}", exc_info=True)
            raise InfrastructureError("Transaction commit failed") from e

    async def _rollback(self) -> None:
        if self.session is not None:
            await self.session.abort_transaction()
            return
        # every insert gets its delete attempt; the caller's exception is re-raised
        for document in reversed(self._inserted):
            try:
                await document.delete()
            except Exception:
                logger.error(
                    f"Compensating delete failed for {type(document).__name__} {document.id}",
                    exc_info=True,
                )
        self._inserted.clear()


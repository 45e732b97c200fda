"""Folder persistence: listing, creation and the view counter."""

import logging
from typing import List

from sqlalchemy import update
from sqlmodel import select

from spiral_catalog.models.records import Folder
from spiral_catalog.models.schemas import FolderCreate
from spiral_catalog.services.database import DatabaseService
from spiral_catalog.services.errors import DATABASE_ERRORS, NotFoundError, StorageError

logger = logging.getLogger(__name__)


class FolderService:
    def __init__(self, database: DatabaseService):
        self.database = database

    async def list_folders(self) -> List[Folder]:
        """Return every folder, ordered by name."""
        try:
            async with self.database.session() as session:
                result = await session.exec(select(Folder).order_by(Folder.name))
                return list(result.all())
        except DATABASE_ERRORS as e:
            raise StorageError("Failed to fetch folders") from e

    async def create_folder(self, data: FolderCreate) -> Folder:
        """
        Insert a new folder.

        The view counter always starts at 0 whatever the caller sent.

        Args:
            data: Validated folder input

        Returns:
            The stored folder, including its generated id and timestamp
        """
        folder = Folder(name=data.name, url=data.url, is_private=data.isPrivate, views=0)
        try:
            async with self.database.session() as session:
                session.add(folder)
                await session.commit()
                await session.refresh(folder)
        except DATABASE_ERRORS as e:
            raise StorageError("Failed to create folder") from e

        logger.info("Created folder %s (%r)", folder.id, folder.name)
        return folder

    async def increment_views(self, folder_id: int) -> Folder:
        """
        Add exactly one to a folder's view counter.

        The increment is a single UPDATE evaluated by the database, so
        concurrent calls never lose a view.

        Args:
            folder_id: The folder to update

        Returns:
            The folder after the increment

        Raises:
            NotFoundError: No folder has this id
            StorageError: The database reported a failure
        """
        stmt = (
            update(Folder)
            .where(Folder.id == folder_id)
            .values(views=Folder.views + 1)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.database.session() as session:
                result = await session.exec(stmt)
                if result.rowcount == 0:
                    raise NotFoundError("Folder", folder_id)
                await session.commit()
                folder = await session.get(Folder, folder_id)
        except DATABASE_ERRORS as e:
            raise StorageError("Failed to update view count") from e

        if folder is None:
            # Deleted between the update and the read
            raise NotFoundError("Folder", folder_id)
        return folder

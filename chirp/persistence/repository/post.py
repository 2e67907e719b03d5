"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, desc, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chirp.domain.error import NotFoundError
from chirp.domain.model import Comment, Post
from chirp.domain.model.common import utcnow
from chirp.domain.repository.post import PostRepository
from chirp.domain.value import PostId, UserId
from chirp.persistence.mappers import (
    comment_to_dict,
    post_to_dict,
    row_to_comment,
    row_to_post,
)
from chirp.persistence.tables import (
    post_comments_table,
    post_likes_table,
    posts_table,
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_likes(self, post_ids: list[UUID]) -> dict[UUID, list[UUID]]:
        """Fetch likes for multiple posts in a single query.

        Returns:
            Dict mapping post_id -> user ids, oldest like first
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_likes_table.c.post_id, post_likes_table.c.user_id)
            .where(post_likes_table.c.post_id.in_(post_ids))
            .order_by(post_likes_table.c.created_at)
        )
        result = await self.session.execute(stmt)

        likes: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            likes[row.post_id].append(row.user_id)
        return likes

    async def _fetch_comments(self, post_ids: list[UUID]) -> dict[UUID, list[Comment]]:
        """Fetch comments for multiple posts in a single query.

        Returns:
            Dict mapping post_id -> comments in the order they were added
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_comments_table)
            .where(post_comments_table.c.post_id.in_(post_ids))
            .order_by(post_comments_table.c.seq)
        )
        result = await self.session.execute(stmt)

        comments: dict[UUID, list[Comment]] = defaultdict(list)
        for row in result.mappings().all():
            comments[row["post_id"]].append(row_to_comment(dict(row)))
        return comments

    async def _build_posts(self, rows) -> List[Post]:
        """Attach likes and comments to post rows."""
        if not rows:
            return []

        post_ids = [row["id"] for row in rows]
        likes = await self._fetch_likes(post_ids)
        comments = await self._fetch_comments(post_ids)

        return [
            row_to_post(
                dict(row),
                likes=likes.get(row["id"], []),
                comments=comments.get(row["id"], []),
            )
            for row in rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                return None

            posts = await self._build_posts([row])
            return posts[0]

    async def find_all(
        self,
        public_only: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest first."""
        with logfire.span(
            "post_repository.find_all",
            public_only=public_only,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)

            if public_only:
                stmt = stmt.where(posts_table.c.is_public.is_(True))

            # seq keeps insertion order among equal timestamps
            stmt = (
                stmt.order_by(desc(posts_table.c.created_at), posts_table.c.seq)
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            posts = await self._build_posts(result.mappings().all())

            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, public_only: bool = True) -> int:
        """Count posts."""
        stmt = select(func.count()).select_from(posts_table)

        if public_only:
            stmt = stmt.where(posts_table.c.is_public.is_(True))

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        include_private: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts by a specific author, newest first."""
        with logfire.span(
            "post_repository.find_by_author",
            author_id=str(author_id),
            include_private=include_private,
        ):
            stmt = select(posts_table).where(posts_table.c.author_id == author_id)

            if not include_private:
                stmt = stmt.where(posts_table.c.is_public.is_(True))

            stmt = (
                stmt.order_by(desc(posts_table.c.created_at), posts_table.c.seq)
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            return await self._build_posts(result.mappings().all())

    async def count_by_author(
        self, author_id: UserId, include_private: bool = False
    ) -> int:
        """Count posts by a specific author."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.author_id == author_id)
        )

        if not include_private:
            stmt = stmt.where(posts_table.c.is_public.is_(True))

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Returns the post as stored, with its current likes and comments.
        """
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)

            # Single-statement upsert; author fields and created_at are
            # never rewritten once the row exists
            stmt = pg_insert(posts_table).values(**post_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={
                    "content": stmt.excluded.content,
                    "is_public": stmt.excluded.is_public,
                    "updated_at": stmt.excluded.updated_at,
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()

            saved = await self.find_by_id(post.id)
            logfire.info("Post saved successfully", post_id=str(post.id))
            return saved or post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post; likes and comments go with it (ON DELETE CASCADE)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def toggle_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Atomically add or remove a user's like.

        Removing is tried first; if no row was removed the like is inserted.
        The (post_id, user_id) primary key keeps a user to one like per post.

        Raises:
            NotFoundError: If the post was deleted before the like landed
        """
        with logfire.span(
            "post_repository.toggle_like", post_id=str(post_id), user_id=str(user_id)
        ):
            remove_stmt = delete(post_likes_table).where(
                and_(
                    post_likes_table.c.post_id == post_id,
                    post_likes_table.c.user_id == user_id,
                )
            )
            removed = await self.session.execute(remove_stmt)

            if removed.rowcount > 0:
                await self.session.flush()
                return False

            insert_stmt = (
                pg_insert(post_likes_table)
                .values(post_id=post_id, user_id=user_id, created_at=utcnow())
                .on_conflict_do_nothing(
                    index_elements=[post_likes_table.c.post_id, post_likes_table.c.user_id]
                )
            )
            await self._insert_for_post(post_id, insert_stmt)
            return True

    async def append_comment(self, post_id: PostId, comment: Comment) -> Comment:
        """Atomically append a comment to a post.

        Raises:
            NotFoundError: If the post was deleted before the comment landed
        """
        stmt = post_comments_table.insert().values(**comment_to_dict(post_id, comment))
        await self._insert_for_post(post_id, stmt)
        return comment

    async def _insert_for_post(self, post_id: PostId, stmt) -> None:
        """Run an insert into a child table of posts inside a savepoint.

        The only constraint left to fail is the foreign key to posts, which
        means the post was deleted concurrently.
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn(
                "Insert lost a race with post deletion",
                post_id=str(post_id),
                error=str(e.orig),
            )
            raise NotFoundError("Post", str(post_id))

from aws_lambda_powertools import Logger

from app.exceptions import PostNotFoundException
from app.models.post import Post
from app.repositories.post_repository import PostRepository
from app.schemas.post_schema import CreatePost, UpdatePost


class PostService:
    ERROR_POST_NOT_FOUND = "Post not found"

    def __init__(self, repository: PostRepository):
        self._logger = Logger(utc=True)
        self._repo = repository

    def create_post(self, create_post: CreatePost) -> Post:
        # created_at is assigned by the store and not read back here
        post_id = self._repo.create_post(create_post.title, create_post.content)
        self._logger.info(f"Post created: {post_id=}")
        return Post(id=post_id, **create_post.model_dump())

    def delete_post(self, post_id: int):
        deleted = self._repo.delete_post(post_id)
        self._logger.info(f"Post deleted: {post_id=} {deleted=}")

    def get_post(self, post_id: int) -> Post:
        item = self._repo.get_post_by_id(post_id)
        if not item:
            self._logger.warning(f"Post not found: {post_id=}")
            raise PostNotFoundException(self.ERROR_POST_NOT_FOUND)
        return Post(**item)

    def get_posts(self) -> list[Post]:
        return [Post(**item) for item in self._repo.get_all_posts()]

    def update_post(self, post_id: int, update_post: UpdatePost) -> Post:
        # Zero affected rows is not an error
        updated = self._repo.update_post(
            post_id, update_post.title, update_post.content
        )
        self._logger.info(f"Post updated: {post_id=} {updated=}")
        return Post(id=post_id, **update_post.model_dump())

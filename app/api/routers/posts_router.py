from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from app.deps import parse_post_id, post_service
from app.models.post import Post
from app.schemas.post_schema import CreatePost, UpdatePost
from app.services.post_service import PostService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_post(
    create_model: CreatePost, service: PostService = Depends(post_service)
) -> Post:
    return service.create_post(create_model)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int = Depends(parse_post_id),
    service: PostService = Depends(post_service),
) -> Response:
    service.delete_post(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{id}", status_code=status.HTTP_200_OK)
def get_post(
    post_id: int = Depends(parse_post_id),
    service: PostService = Depends(post_service),
) -> Post:
    return service.get_post(post_id)


@router.get("", status_code=status.HTTP_200_OK)
def get_posts(service: PostService = Depends(post_service)) -> list[Post]:
    return service.get_posts()


@router.put("/{id}", status_code=status.HTTP_200_OK)
def update_post(
    update_model: UpdatePost,
    post_id: int = Depends(parse_post_id),
    service: PostService = Depends(post_service),
) -> Post:
    return service.update_post(post_id, update_model)

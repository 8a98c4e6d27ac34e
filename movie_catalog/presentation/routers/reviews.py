import uuid
from http import HTTPStatus
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends

from movie_catalog.applications.interfaces.dtos.review import ReviewPublic, ReviewSchema
from movie_catalog.applications.services.catalog_dto_mapper import CatalogDtoMapper
from movie_catalog.applications.services.review_aggregation_service import ReviewAggregationService
from movie_catalog.domain.exceptions import DomainError
from movie_catalog.domain.models.actor import Actor
from movie_catalog.domain.models.role import Role
from movie_catalog.infrastructure.config.dependencies import get_review_service, require_role
from movie_catalog.presentation.routers.errors import to_http_exception

router = APIRouter(prefix="/movies", tags=["reviews"])

ReviewServiceDep = Annotated[ReviewAggregationService, Depends(get_review_service)]
ReviewerDep = Annotated[Actor, Depends(require_role(Role.USER))]
AdminDep = Annotated[Actor, Depends(require_role(Role.ADMIN))]


@router.get("/{movie_id}/reviews", response_model=List[ReviewPublic])
async def read_reviews(movie_id: int, review_service: ReviewServiceDep):
    try:
        reviews = await review_service.get_movie_reviews(movie_id)
        return CatalogDtoMapper.to_review_publics(reviews)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{movie_id}/reviews", status_code=HTTPStatus.CREATED, response_model=ReviewPublic)
async def create_review(movie_id: int, review: ReviewSchema, actor: ReviewerDep, review_service: ReviewServiceDep):
    try:
        created = await review_service.create_review(actor, movie_id, review)
        return CatalogDtoMapper.to_review_public(created)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{movie_id}/reviews", response_model=ReviewPublic)
async def edit_review(movie_id: int, review: ReviewSchema, actor: ReviewerDep, review_service: ReviewServiceDep):
    try:
        updated = await review_service.edit_review(actor, movie_id, review)
        return CatalogDtoMapper.to_review_public(updated)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{movie_id}/reviews", response_model=ReviewPublic)
async def delete_review(
    movie_id: int,
    actor: ReviewerDep,
    review_service: ReviewServiceDep,
    user_id: Optional[uuid.UUID] = None,
):
    try:
        deleted = await review_service.delete_review(actor, movie_id, user_id)
        return CatalogDtoMapper.to_review_public(deleted)
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{movie_id}/reviews/hide/{user_id}", response_model=ReviewPublic)
async def hide_review(movie_id: int, user_id: uuid.UUID, _admin: AdminDep, review_service: ReviewServiceDep):
    try:
        review = await review_service.hide_review(movie_id, user_id)
        return CatalogDtoMapper.to_review_public(review)
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{movie_id}/reviews/show/{user_id}", response_model=ReviewPublic)
async def show_review(movie_id: int, user_id: uuid.UUID, _admin: AdminDep, review_service: ReviewServiceDep):
    try:
        review = await review_service.show_review(movie_id, user_id)
        return CatalogDtoMapper.to_review_public(review)
    except DomainError as e:
        raise to_http_exception(e)

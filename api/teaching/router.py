"""
Teaching catalog API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Request, status

from core.schemas import MessageResponse
from core.sql import INT4_MAX, INT4_MIN
from core.validation import parse_id, parse_int_param

from . import schemas, service

router = APIRouter(prefix="/api")


@router.get("/courses", response_model=schemas.CourseListResponse)
async def list_courses() -> schemas.CourseListResponse:
    return await service.list_courses()


@router.post("/courses", response_model=schemas.Course, status_code=status.HTTP_201_CREATED)
async def create_course(request: Request) -> schemas.Course:
    return await service.create_course(await request.json())


@router.get("/courses/{course_id}", response_model=schemas.Course)
async def get_course(course_id: str) -> schemas.Course:
    return await service.get_course(parse_id(course_id, label="course"))


@router.put("/courses/{course_id}", response_model=schemas.Course)
async def update_course(course_id: str, request: Request) -> schemas.Course:
    parsed_id = parse_id(course_id, label="course")
    return await service.update_course(parsed_id, await request.json())


@router.delete("/courses/{course_id}", response_model=MessageResponse)
async def delete_course(course_id: str) -> dict:
    return await service.delete_course(parse_id(course_id, label="course"))


@router.get("/laboratories", response_model=schemas.LaboratoryListResponse)
async def list_laboratories() -> schemas.LaboratoryListResponse:
    return await service.list_laboratories()


@router.post("/laboratories", response_model=schemas.Laboratory, status_code=status.HTTP_201_CREATED)
async def create_laboratory(request: Request) -> schemas.Laboratory:
    return await service.create_laboratory(await request.json())


@router.get("/laboratories/{laboratory_id}", response_model=schemas.Laboratory)
async def get_laboratory(laboratory_id: str) -> schemas.Laboratory:
    return await service.get_laboratory(parse_id(laboratory_id, label="laboratory"))


@router.put("/laboratories/{laboratory_id}", response_model=schemas.Laboratory)
async def update_laboratory(laboratory_id: str, request: Request) -> schemas.Laboratory:
    parsed_id = parse_id(laboratory_id, label="laboratory")
    return await service.update_laboratory(parsed_id, await request.json())


@router.delete("/laboratories/{laboratory_id}", response_model=MessageResponse)
async def delete_laboratory(laboratory_id: str) -> dict:
    return await service.delete_laboratory(parse_id(laboratory_id, label="laboratory"))


@router.get("/resources", response_model=schemas.ResourceListResponse)
async def list_resources(
    category: str | None = Query(default=None, max_length=50),
    course_id: str | None = Query(default=None, alias="courseId"),
) -> schemas.ResourceListResponse:
    return await service.list_resources(
        category=category,
        course_id=parse_int_param(
            course_id,
            default=None,
            message="CourseId must be an integer",
            minimum=INT4_MIN,
            maximum=INT4_MAX,
        ),
    )


@router.post("/resources", response_model=schemas.Resource, status_code=status.HTTP_201_CREATED)
async def create_resource(request: Request) -> schemas.Resource:
    return await service.create_resource(await request.json())


@router.get("/resources/{resource_id}", response_model=schemas.Resource)
async def get_resource(resource_id: str) -> schemas.Resource:
    return await service.get_resource(parse_id(resource_id, label="resource"))


@router.put("/resources/{resource_id}", response_model=schemas.Resource)
async def update_resource(resource_id: str, request: Request) -> schemas.Resource:
    parsed_id = parse_id(resource_id, label="resource")
    return await service.update_resource(parsed_id, await request.json())


@router.delete("/resources/{resource_id}", response_model=MessageResponse)
async def delete_resource(resource_id: str) -> dict:
    return await service.delete_resource(parse_id(resource_id, label="resource"))

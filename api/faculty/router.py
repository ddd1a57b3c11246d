"""
Faculty API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Request, status

from core.schemas import MessageResponse
from core.validation import parse_id

from . import schemas, service

router = APIRouter(prefix="/api/faculty")


@router.get("", response_model=schemas.FacultyListResponse)
async def list_faculty(
    category: str | None = Query(default=None, max_length=50),
    search: str | None = Query(default=None, max_length=200),
) -> schemas.FacultyListResponse:
    return await service.list_faculty(category=category, search=search)


@router.post("", response_model=schemas.FacultyMember, status_code=status.HTTP_201_CREATED)
async def create_faculty(request: Request) -> schemas.FacultyMember:
    body = await request.json()
    return await service.create_faculty(body)


@router.get("/{faculty_id}", response_model=schemas.FacultyMember)
async def get_faculty(faculty_id: str) -> schemas.FacultyMember:
    return await service.get_faculty(parse_id(faculty_id, label="faculty"))


@router.put("/{faculty_id}", response_model=schemas.FacultyMember)
async def update_faculty(faculty_id: str, request: Request) -> schemas.FacultyMember:
    parsed_id = parse_id(faculty_id, label="faculty")
    body = await request.json()
    return await service.update_faculty(parsed_id, body)


@router.delete("/{faculty_id}", response_model=MessageResponse)
async def delete_faculty(faculty_id: str) -> dict:
    return await service.delete_faculty(parse_id(faculty_id, label="faculty"))
